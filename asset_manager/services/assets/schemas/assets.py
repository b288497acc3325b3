from marshmallow import EXCLUDE, post_load
from marshmallow.fields import Boolean, Integer, List, String
from marshmallow.validate import Length, Range

from asset_manager.constants import (
    MAX_ASSET_DECIMALS,
    MAX_ASSET_NAME_BYTES,
    MAX_UINT64,
    MAX_UNIT_NAME_BYTES,
    MAX_URL_BYTES,
    METADATA_HASH_BYTES,
)
from asset_manager.lifecycle.types import AssetSpec
from asset_manager.services.common.schemas import AddressField, AMSchema


class AssetCreateRequest(AMSchema):
    """POST /assets

    load-only parameters:

        - creatorAddr (:class:`AddressField`), defaults to the signing account
        - assetName, unitName, url, metadataHash (str)
        - totalIssuance, decimals (int)
        - defaultFrozen (bool)
        - managerAddr, reserveAddr, freezeAddr, clawbackAddr (:class:`AddressField`)

    dump-only parameters:

        - assetId (int)
        - txHash (str)
    """

    class Meta:
        unknown = EXCLUDE

    # Deserialization fields.
    creator_address = AddressField(data_key="creatorAddr", load_only=True, load_default="")
    asset_name = String(
        data_key="assetName", required=True, load_only=True, validate=Length(max=MAX_ASSET_NAME_BYTES)
    )
    unit_name = String(
        data_key="unitName", required=True, load_only=True, validate=Length(max=MAX_UNIT_NAME_BYTES)
    )
    total = Integer(
        data_key="totalIssuance",
        required=True,
        load_only=True,
        strict=True,
        validate=Range(min=0, max=MAX_UINT64),
    )
    decimals = Integer(
        load_only=True, strict=True, load_default=0, validate=Range(min=0, max=MAX_ASSET_DECIMALS)
    )
    default_frozen = Boolean(data_key="defaultFrozen", load_only=True, load_default=False)
    url = String(load_only=True, load_default="", validate=Length(max=MAX_URL_BYTES))
    metadata_hash = String(
        data_key="metadataHash",
        load_only=True,
        load_default=None,
        allow_none=True,
        validate=Length(equal=METADATA_HASH_BYTES),
    )
    manager_address = AddressField(data_key="managerAddr", load_only=True, load_default="")
    reserve_address = AddressField(data_key="reserveAddr", load_only=True, load_default="")
    freeze_address = AddressField(data_key="freezeAddr", load_only=True, load_default="")
    clawback_address = AddressField(data_key="clawbackAddr", load_only=True, load_default="")

    # Serialization fields.
    asset_id = Integer(data_key="assetId", dump_only=True)
    tx_id = String(data_key="txHash", dump_only=True)

    @post_load
    def make_spec(self, data, **kwargs) -> AssetSpec:
        return AssetSpec(**data)


class AssetDestroyRequest(AMSchema):
    """DELETE /assets

    load-only parameters:

        - managerAddr (:class:`AddressField`), defaults to the signing account

    parameters:

        - assetId (int)

    dump-only parameters:

        - txHash (str)
    """

    class Meta:
        unknown = EXCLUDE

    asset_id = Integer(
        data_key="assetId", required=True, strict=True, validate=Range(min=1, max=MAX_UINT64)
    )
    manager_address = AddressField(data_key="managerAddr", load_only=True, load_default="")

    tx_id = String(data_key="txHash", dump_only=True)


class AssetListRequest(AMSchema):
    """GET /assets?address=<str>"""

    class Meta:
        unknown = EXCLUDE

    address = AddressField(required=True)
    asset_ids = List(Integer(), data_key="assetIds", dump_only=True)
