"""Service creating and destroying assets on behalf of an operator.

Requests are signed by a single, configured signing account. For every
request, its key is leased into the configured kmd wallet and removed from it
again once the transaction is confirmed or has failed.

Creating an asset looks like this::

    POST /assets

        {
            "assetName": "Token",
            "unitName": "TOK",
            "totalIssuance": 1000000,
            "decimals": 2,
            "managerAddr": <str>,
            ...
        }

    200 OK

        {"assetId": <int>, "txHash": <str>}

Destroying one::

    DELETE /assets

        {"assetId": <int>, "managerAddr": <str>}

    200 OK

        {"assetId": <int>, "txHash": <str>}

"""
from typing import Mapping

import flask

from asset_manager.clients import KeyDaemon, LedgerNode
from asset_manager.lifecycle import AssetLifecycleOrchestrator, KeyLeaseManager
from asset_manager.services.assets.registry import AssetRegistry
from asset_manager.services.utils.factories import construct_flask_app
from asset_manager.services.utils.testing import TestRedis
from asset_manager.utils.configuration import AssetManagerConfig


def construct_asset_service(config: AssetManagerConfig, test_config: Mapping = None) -> flask.Flask:
    """Construct the flask app and wire the asset lifecycle into its config.

    If `test_config` sets ``TESTING``, assets are recorded in memory instead
    of Redis.
    """
    app = construct_flask_app(asset_table=config.redis.table, test_config=test_config)

    if app.config.get("TESTING", False):
        registry = AssetRegistry(TestRedis(config.redis.table), table=config.redis.table)
    else:
        registry = AssetRegistry.from_config(config.redis)

    ledger = LedgerNode.from_config(config.algod)
    keys = KeyLeaseManager(KeyDaemon.from_config(config.kmd))

    app.config["asset-registry"] = registry
    app.config["signing-identity"] = config.wallet.identity
    app.config["orchestrator"] = AssetLifecycleOrchestrator(
        ledger, keys, registry=registry, confirmation_timeout=config.confirmation_timeout
    )
    return app
