"""Create, destroy and list assets.

The following endpoints are supplied by this blueprint:

    * [POST] /assets
        Create a new asset, signed by the service's configured signing
        account. Responds once the creation transaction is confirmed.

    * [DELETE] /assets
        Destroy an asset managed by the signing account. Responds once the
        destruction transaction is confirmed.

    * [GET] /assets?address=<str>
        List the ids of all assets created through this service for `address`.

Lifecycle errors are returned as JSON::

    {"error": <kind>, "message": <str>, "txHash": <str or null>}

A non-null `txHash` means the transaction was broadcast and may still be
confirmed later. If the asset was created but could not be recorded, its id
is added as `assetId`.
"""
from flask import Blueprint, current_app, jsonify, request
from structlog import get_logger

from asset_manager.exceptions import (
    AssetDiscoveryError,
    AssetManagerError,
    AssetRecordError,
    BroadcastError,
    BuildError,
    ConfirmationTimeoutError,
    NodeQueryError,
    SigningError,
    ValidationError,
    WalletError,
)
from asset_manager.exceptions.db import AssetStoreError
from asset_manager.services.assets.schemas import (
    AssetCreateRequest,
    AssetDestroyRequest,
    AssetListRequest,
)
from asset_manager.services.common.metrics import REDMetricsTracker

log = get_logger(__name__)

assets_blueprint = Blueprint("assets_view", __name__)

asset_create_schema = AssetCreateRequest()
asset_destroy_schema = AssetDestroyRequest()
asset_list_schema = AssetListRequest()

#: HTTP status codes for lifecycle errors; the first match along the MRO wins.
ERROR_STATUS_CODES = {
    ValidationError: 400,
    BuildError: 400,
    SigningError: 400,
    WalletError: 502,
    BroadcastError: 502,
    NodeQueryError: 502,
    AssetDiscoveryError: 502,
    ConfirmationTimeoutError: 504,
    AssetRecordError: 500,
}


def status_code_for(exc: AssetManagerError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


@assets_blueprint.errorhandler(AssetManagerError)
def handle_asset_manager_error(exc: AssetManagerError):
    status = status_code_for(exc)
    if status >= 500:
        log.error("Asset request failed", kind=exc.kind, tx_id=exc.tx_id, error=str(exc))
    body = {"error": exc.kind, "message": str(exc), "txHash": exc.tx_id}
    if getattr(exc, "asset_id", None) is not None:
        body["assetId"] = exc.asset_id
    return jsonify(body), status


@assets_blueprint.errorhandler(AssetStoreError)
def handle_asset_store_error(exc: AssetStoreError):
    log.error("Asset registry unavailable", error=str(exc))
    return jsonify({"error": "store_error", "message": str(exc), "txHash": None}), 500


@assets_blueprint.route("/assets", methods=["POST"])
def create_asset_view():
    """Create a new asset and wait for its confirmation.
    ---
    parameters:
      - name: body
        in: body
        required: true
        schema:
          type: object
          required: [assetName, unitName, totalIssuance]
          properties:
            creatorAddr: {type: string}
            assetName: {type: string}
            unitName: {type: string}
            totalIssuance: {type: integer}
            decimals: {type: integer}
            defaultFrozen: {type: boolean}
            url: {type: string}
            metadataHash: {type: string}
            managerAddr: {type: string}
            reserveAddr: {type: string}
            freezeAddr: {type: string}
            clawbackAddr: {type: string}
    responses:
      200:
        description: "Id of the new asset and hash of the creation transaction."
      400:
        description: "Invalid request or asset parameters."
      504:
        description: "The transaction was broadcast, but not confirmed in time."
    """
    with REDMetricsTracker(request.method, "/assets"):
        return create_asset()


def create_asset():
    spec = asset_create_schema.validate_and_deserialize(request.get_json(silent=True))

    log.debug("Creating asset", asset_name=spec.asset_name, unit_name=spec.unit_name)
    created = current_app.config["orchestrator"].create_asset(
        spec, current_app.config["signing-identity"]
    )
    return asset_create_schema.jsonify(created)


@assets_blueprint.route("/assets", methods=["DELETE"])
def destroy_asset_view():
    """Destroy an asset and wait for the confirmation.
    ---
    parameters:
      - name: body
        in: body
        required: true
        schema:
          type: object
          required: [assetId]
          properties:
            assetId: {type: integer}
            managerAddr: {type: string}
    responses:
      200:
        description: "Id of the destroyed asset and hash of the destruction transaction."
      502:
        description: "The node rejected the transaction, i.e. the asset does not exist."
    """
    with REDMetricsTracker(request.method, "/assets"):
        return destroy_asset()


def destroy_asset():
    data = asset_destroy_schema.validate_and_deserialize(request.get_json(silent=True))

    log.debug("Destroying asset", asset_id=data["asset_id"])
    destroyed = current_app.config["orchestrator"].destroy_asset(
        data["asset_id"],
        current_app.config["signing-identity"],
        manager_address=data["manager_address"] or None,
    )
    return asset_destroy_schema.jsonify(destroyed)


@assets_blueprint.route("/assets", methods=["GET"])
def list_assets_view():
    """List the assets recorded for an address.
    ---
    parameters:
      - name: address
        in: query
        required: true
        type: string
    responses:
      200:
        description: "The address and the ids of its assets."
    """
    with REDMetricsTracker(request.method, "/assets"):
        return list_assets()


def list_assets():
    data = asset_list_schema.validate_and_deserialize(request.args)
    asset_ids = current_app.config["asset-registry"].list_assets(data["address"])
    return asset_list_schema.jsonify({"address": data["address"], "asset_ids": asset_ids})
