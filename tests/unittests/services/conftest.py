from unittest import mock

import pytest

from asset_manager.lifecycle import AssetLifecycleOrchestrator
from asset_manager.services.utils.factories import construct_flask_app


@pytest.fixture
def mock_orchestrator():
    return mock.Mock(spec=AssetLifecycleOrchestrator)


@pytest.fixture
def app(mock_orchestrator, identity, registry):
    app = construct_flask_app(test_config={"TESTING": True}, enable_apidocs=False)
    app.config["orchestrator"] = mock_orchestrator
    app.config["signing-identity"] = identity
    app.config["asset-registry"] = registry
    return app


@pytest.fixture
def client(app):
    return app.test_client()
