from asset_manager.hooks.specs import HOOK_IMPL
from asset_manager.services.common.blueprints.admin import admin_blueprint
from asset_manager.services.common.blueprints.metrics import metrics_blueprint

__all__ = ["admin_blueprint", "metrics_blueprint"]


@HOOK_IMPL
def register_blueprints(app):
    for bp in (admin_blueprint, metrics_blueprint):
        app.register_blueprint(bp)
