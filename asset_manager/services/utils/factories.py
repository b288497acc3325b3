from typing import List, Mapping

import flask
from flasgger import Swagger

from asset_manager import __version__
from asset_manager.hooks import get_plugin_manager

SWAGGER_TEMPLATE = {
    "info": {
        "title": "Asset Manager",
        "description": "Create and destroy Algorand Standard Assets.",
        "version": __version__,
    }
}


def attach_blueprints(app: flask.Flask, *blueprints: List[flask.Blueprint]):
    """Attach the given `blueprints` to the given `app` and return it."""
    for blueprint in blueprints:
        app.register_blueprint(blueprint)
    return app


def load_app_config(app: flask.Flask, test_config: Mapping = None, config_file: str = "config.py"):
    """Update the `app`'s config from `test_config`, or the instance's `config_file`.

    A missing instance config file is not an error.
    """
    if test_config is not None:
        app.config.from_mapping(test_config)
    else:
        app.config.from_pyfile(config_file, silent=True)


def construct_flask_app(
    asset_table: str = "assets",
    test_config: Mapping = None,
    secret: str = "dev",
    config_file: str = "config.py",
    enable_plugins: bool = True,
    enable_apidocs: bool = True,
) -> flask.Flask:
    """Construct the asset manager's flask app.

    Endpoints are contributed by the services through the `register_blueprints`
    hook; without plugins (`enable_plugins=False`) the app is bare. With them,
    the app serves:

        `/assets`
        Create, destroy and list assets.

        `/metrics`
        Prometheus metrics.

        `/status`
        200 OK while the app is up.

    `/apidocs` serves a Swagger UI built from the endpoints' docstrings,
    unless `enable_apidocs` is `False`.
    """
    app = flask.Flask("asset_manager", instance_relative_config=True)
    app.config.from_mapping(SECRET_KEY=secret, ASSET_TABLE=asset_table)
    load_app_config(app, test_config, config_file)

    if enable_plugins:
        get_plugin_manager().hook.register_blueprints(app=app)

    if enable_apidocs:
        Swagger(app, template=SWAGGER_TEMPLATE)

    return app
