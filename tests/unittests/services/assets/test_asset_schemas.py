import pytest

from asset_manager.exceptions import ValidationError
from asset_manager.lifecycle import AssetSpec
from asset_manager.services.assets.schemas import (
    AssetCreateRequest,
    AssetDestroyRequest,
    AssetListRequest,
)


class TestAssetCreateRequest:
    def test_loads_asset_spec_with_defaults(self):
        spec = AssetCreateRequest().validate_and_deserialize(
            {"assetName": "Token", "unitName": "TOK", "totalIssuance": 10}
        )
        assert spec == AssetSpec(asset_name="Token", unit_name="TOK", total=10)

    def test_unknown_fields_are_ignored(self):
        spec = AssetCreateRequest().validate_and_deserialize(
            {"assetName": "Token", "unitName": "TOK", "totalIssuance": 10, "color": "blue"}
        )
        assert spec.total == 10

    def test_total_up_to_uint64_max_is_accepted(self):
        spec = AssetCreateRequest().validate_and_deserialize(
            {"assetName": "Token", "unitName": "TOK", "totalIssuance": 2 ** 64 - 1}
        )
        assert spec.total == 2 ** 64 - 1

    def test_errors_are_reported_by_request_field_name(self):
        with pytest.raises(ValidationError) as exc_info:
            AssetCreateRequest().validate_and_deserialize({"unitName": "TOK", "totalIssuance": 10})
        assert "assetName" in exc_info.value.errors

    def test_none_is_rejected(self):
        with pytest.raises(ValidationError):
            AssetCreateRequest().validate_and_deserialize(None)


class TestAssetDestroyRequest:
    def test_manager_defaults_to_empty(self):
        data = AssetDestroyRequest().validate_and_deserialize({"assetId": 5})
        assert data == {"asset_id": 5, "manager_address": ""}

    def test_dumps_tx_hash(self):
        dumped = AssetDestroyRequest().dump({"asset_id": 5, "tx_id": "TX", "manager_address": "A"})
        assert dumped == {"assetId": 5, "txHash": "TX"}


class TestAssetListRequest:
    def test_requires_valid_address(self, signing_address):
        assert AssetListRequest().validate_and_deserialize({"address": signing_address}) == {
            "address": signing_address
        }
        with pytest.raises(ValidationError):
            AssetListRequest().validate_and_deserialize({"address": signing_address[:-1]})
