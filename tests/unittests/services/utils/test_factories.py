from unittest import mock

import flask
import pytest

from asset_manager import __version__
from asset_manager.hooks import get_plugin_manager
from asset_manager.services.utils.factories import attach_blueprints, construct_flask_app


@pytest.fixture
def TEST_CONFIG_DICT():
    return {
        "TESTING": True,
        "CONFIRMATION_MODE": "STRICT",
    }


@pytest.fixture
def TEST_CONFIG_FILE(tmp_path):
    config_path = tmp_path.joinpath("config.py")
    with config_path.open("w") as f:
        f.write("TESTING = False\n")
        f.write('CONFIRMATION_MODE = "LENIENT"\n')

    return str(config_path)


class TestConstructFlaskApp:
    @pytest.mark.parametrize("test_config", [None, {"TESTING": True}], ids=["Without Test Config", "With Test Config"])
    def test_constructor_always_creates_expected_config_settings_regardless_of_test_config(self, test_config):
        constructed_app = construct_flask_app(test_config=test_config)
        assert constructed_app.config.get("SECRET_KEY") == "dev"
        assert constructed_app.config.get("ASSET_TABLE") == "assets"

    def test_test_config_overwrites_app_configs(self):
        config = {"ASSET_TABLE": "custom_table", "SECRET_KEY": "banana pie"}
        app = construct_flask_app(test_config=config)
        for key, value in config.items():
            assert app.config.get(key) == value

    @pytest.mark.parametrize("plugins_enabled", [True, False])
    def test_constructor_makes_call_to_blueprint_registration_hook(self, plugins_enabled):
        pm = mock.Mock()
        with mock.patch("asset_manager.services.utils.factories.get_plugin_manager", return_value=pm):
            construct_flask_app(enable_plugins=plugins_enabled)
        assert pm.hook.register_blueprints.called is plugins_enabled

    def test_loads_config_from_file_if_no_test_config_specified(self, TEST_CONFIG_FILE):
        app = construct_flask_app(config_file=TEST_CONFIG_FILE)
        assert app.config.get("TESTING") is False
        assert app.config.get("CONFIRMATION_MODE") == "LENIENT"

    def test_loads_config_from_test_config_instead_of_file_if_test_config_specified(self, TEST_CONFIG_DICT, TEST_CONFIG_FILE):
        app = construct_flask_app(test_config=TEST_CONFIG_DICT, config_file=TEST_CONFIG_FILE)
        for key, value in TEST_CONFIG_DICT.items():
            assert app.config.get(key) == value

    @pytest.mark.parametrize(
        "blueprint", ["admin_view", "metrics_view", "assets_view"]
    )
    def test_service_blueprints_are_registered_through_plugins(self, blueprint):
        app = construct_flask_app(test_config={"TESTING": True})
        assert blueprint in app.blueprints

    def test_apidocs_describe_the_asset_manager(self):
        app = construct_flask_app(test_config={"TESTING": True})
        spec = app.test_client().get("/apispec_1.json").get_json()
        assert spec["info"]["title"] == "Asset Manager"
        assert spec["info"]["version"] == __version__
        assert "/assets" in spec["paths"]

    def test_apidocs_can_be_disabled(self):
        app = construct_flask_app(test_config={"TESTING": True}, enable_apidocs=False)
        assert "flasgger" not in app.blueprints


def test_attach_blueprints_registers_all_given_blueprints():
    app = flask.Flask(__name__)
    first, second = flask.Blueprint("first", __name__), flask.Blueprint("second", __name__)
    assert attach_blueprints(app, first, second) is app
    assert {"first", "second"} <= set(app.blueprints)


def test_plugin_manager_loads_service_hook_implementations():
    pm = get_plugin_manager()
    plugin_names = {pm.get_name(plugin) for plugin in pm.get_plugins()}
    assert any(name.endswith("assets.blueprints") for name in plugin_names)
    assert any(name.endswith("common.blueprints") for name in plugin_names)
