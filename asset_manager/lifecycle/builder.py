"""Build unsigned asset configuration transactions.

Both builders are pure functions of their inputs. They validate everything
the protocol would reject up front, so a malformed request fails with
:exc:`InvalidParamsError` before any key is used for signing.
"""
from typing import Union

from algosdk import encoding
from algosdk import error as sdk_error
from algosdk import transaction

from asset_manager.constants import (
    MAX_ASSET_DECIMALS,
    MAX_ASSET_NAME_BYTES,
    MAX_UINT64,
    MAX_UNIT_NAME_BYTES,
    MAX_URL_BYTES,
    METADATA_HASH_BYTES,
)
from asset_manager.exceptions import InvalidParamsError
from asset_manager.lifecycle.types import AssetSpec, NetworkParams

_SDK_ERRORS = (
    sdk_error.EmptyAddressError,
    sdk_error.OutOfRangeDecimalsError,
    sdk_error.WrongMetadataLengthError,
    TypeError,
    ValueError,
)


def check_address(field: str, address: str, required: bool = True) -> None:
    if not address:
        if required:
            raise InvalidParamsError(field, "must not be empty")
        return
    if not encoding.is_valid_address(address):
        raise InvalidParamsError(field, f"'{address}' is not a valid address")


def check_uint(field: str, value, minimum: int = 0, maximum: int = MAX_UINT64) -> None:
    # bool is an int subclass, but never a valid amount.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParamsError(field, "must be an integer")
    if not minimum <= value <= maximum:
        raise InvalidParamsError(field, f"must be between {minimum} and {maximum}")


def check_length(field: str, value: str, limit: int) -> None:
    if len(value.encode("utf-8")) > limit:
        raise InvalidParamsError(field, f"must not exceed {limit} bytes")


def as_metadata_hash(value: Union[str, bytes, None]) -> Union[bytes, None]:
    if not value:
        return None
    if isinstance(value, str):
        value = value.encode("utf-8")
    if len(value) != METADATA_HASH_BYTES:
        raise InvalidParamsError("metadata_hash", f"must be exactly {METADATA_HASH_BYTES} bytes")
    return value


def suggested_params(params: NetworkParams) -> transaction.SuggestedParams:
    """Convert `params` into the SDK's representation, applying our validity window."""
    check_uint("first_valid", params.first_valid)
    return transaction.SuggestedParams(
        fee=params.fee,
        first=params.first_valid,
        last=params.last_valid,
        gh=params.genesis_hash,
        gen=params.genesis_id,
        flat_fee=params.flat_fee,
    )


def build_create(spec: AssetSpec, params: NetworkParams) -> transaction.AssetCreateTxn:
    """Build the transaction creating the asset described by `spec`.

    :raises InvalidParamsError: if `spec` violates the protocol's bounds.
    """
    check_address("creator_address", spec.creator_address)
    for role in ("manager_address", "reserve_address", "freeze_address", "clawback_address"):
        check_address(role, getattr(spec, role), required=False)
    check_uint("total", spec.total)
    check_uint("decimals", spec.decimals, maximum=MAX_ASSET_DECIMALS)
    check_length("asset_name", spec.asset_name, MAX_ASSET_NAME_BYTES)
    check_length("unit_name", spec.unit_name, MAX_UNIT_NAME_BYTES)
    check_length("url", spec.url, MAX_URL_BYTES)
    metadata_hash = as_metadata_hash(spec.metadata_hash)

    try:
        return transaction.AssetCreateTxn(
            spec.creator_address,
            suggested_params(params),
            spec.total,
            spec.decimals,
            spec.default_frozen,
            manager=spec.manager_address or None,
            reserve=spec.reserve_address or None,
            freeze=spec.freeze_address or None,
            clawback=spec.clawback_address or None,
            unit_name=spec.unit_name,
            asset_name=spec.asset_name,
            url=spec.url,
            metadata_hash=metadata_hash,
        )
    except _SDK_ERRORS as e:
        raise InvalidParamsError("asset", str(e)) from e


def build_destroy(
    asset_id: int, manager_address: str, params: NetworkParams
) -> transaction.AssetDestroyTxn:
    """Build the transaction destroying asset `asset_id`.

    Only the asset's manager may send it, and the ledger only accepts it
    while the creator holds the entire supply.

    :raises InvalidParamsError: if the id or the address are malformed.
    """
    check_uint("asset_id", asset_id, minimum=1)
    check_address("manager_address", manager_address)

    try:
        return transaction.AssetDestroyTxn(manager_address, suggested_params(params), asset_id)
    except _SDK_ERRORS as e:
        raise InvalidParamsError("asset", str(e)) from e
