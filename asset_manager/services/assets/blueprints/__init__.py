from asset_manager.hooks.specs import HOOK_IMPL
from asset_manager.services.assets.blueprints.assets import assets_blueprint

__all__ = ["assets_blueprint"]


@HOOK_IMPL
def register_blueprints(app):
    app.register_blueprint(assets_blueprint)
