from types import SimpleNamespace
from unittest import mock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from asset_manager.exceptions.db import AssetStoreError
from asset_manager.services.assets.registry import AssetRegistry


class TestAssetRegistry:
    def test_records_are_listed_in_ascending_order(self, registry):
        for asset_id in (17, 5, 9):
            registry.record_asset("OWNER", asset_id)
        assert registry.list_assets("OWNER") == [5, 9, 17]

    def test_recording_the_same_asset_twice_keeps_one_entry(self, registry):
        registry.record_asset("OWNER", 5)
        registry.record_asset("OWNER", 5)
        assert registry.list_assets("OWNER") == [5]

    def test_owners_are_kept_apart(self, registry):
        registry.record_asset("OWNER", 5)
        registry.record_asset("OTHER", 6)
        assert registry.list_assets("OWNER") == [5]
        assert registry.list_assets("NOBODY") == []

    def test_keys_are_prefixed_with_table(self, registry, test_redis):
        registry.record_asset("OWNER", 5)
        assert "assets:OWNER" in test_redis

    @pytest.mark.parametrize("operation", ["record_asset", "list_assets"])
    def test_redis_errors_raise_asset_store_error(self, operation):
        connection = mock.Mock(**{
            "sadd.side_effect": RedisConnectionError("refused"),
            "smembers.side_effect": RedisConnectionError("refused"),
        })
        registry = AssetRegistry(connection, table="assets")
        args = ("OWNER", 5) if operation == "record_asset" else ("OWNER",)

        with pytest.raises(AssetStoreError) as exc_info:
            getattr(registry, operation)(*args)
        assert exc_info.value.owner == "OWNER"

    @mock.patch("asset_manager.services.assets.registry.Redis")
    def test_from_config_connects_to_configured_database(self, mock_redis):
        config = SimpleNamespace(host="redis.local", port=6380, db=2, table="tokens")
        registry = AssetRegistry.from_config(config)
        mock_redis.assert_called_once_with(host="redis.local", port=6380, db=2)
        assert registry.table == "tokens"
