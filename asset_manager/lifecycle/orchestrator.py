"""Run the full lifecycle of an asset creation or destruction.

Both operations follow the same skeleton::

    acquire key -> fetch params -> build -> sign & broadcast -> wait -> release key

The key is released exactly once per run, after all other stages have
finished or failed; this includes timeouts, cancellation and the calling
greenlet being killed. A failed release is logged and counted, but never
replaces the outcome of the operation itself.
"""
import dataclasses
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from gevent.event import Event

from asset_manager.constants import DEFAULT_CONFIRMATION_TIMEOUT
from asset_manager.exceptions import AssetDiscoveryError, AssetManagerError, AssetRecordError, NodeQueryError
from asset_manager.exceptions.db import AssetStoreError
from asset_manager.exceptions.services import ServiceError
from asset_manager.lifecycle.builder import build_create, build_destroy
from asset_manager.lifecycle.confirmation import ConfirmationWaiter
from asset_manager.lifecycle.keys import KeyLeaseManager
from asset_manager.lifecycle.metrics import ASSET_OPERATIONS_TOTAL, KEY_RELEASE_FAILURES_TOTAL
from asset_manager.lifecycle.submission import submit
from asset_manager.lifecycle.types import (
    AssetSpec,
    ConfirmationResult,
    CreatedAsset,
    DestroyedAsset,
    LeasedKey,
    NetworkParams,
    SigningIdentity,
)

log = structlog.get_logger(__name__)


class AssetLifecycleOrchestrator:
    """Create and destroy assets, leasing a signing key for each run.

    :param ledger: the :class:`asset_manager.clients.LedgerNode` to talk to.
    :param keys: the :class:`KeyLeaseManager` handing out signing keys.
    :param registry: persistence collaborator; its ``record_asset(owner, asset_id)``
        is called once a creation has fully succeeded. May be ``None``.
    :param confirmation_timeout: default number of seconds to wait for confirmation.
    """

    def __init__(
        self,
        ledger,
        keys: KeyLeaseManager,
        registry=None,
        waiter: ConfirmationWaiter = None,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
    ):
        self.ledger = ledger
        self.keys = keys
        self.registry = registry
        self.waiter = waiter or ConfirmationWaiter(ledger)
        self.confirmation_timeout = confirmation_timeout

    @contextmanager
    def leased_key(self, identity: SigningIdentity) -> Iterator[LeasedKey]:
        """Lease a key for the duration of the `with` block.

        Nothing is released if acquiring the key fails, since nothing was leased.
        """
        key = self.keys.acquire(identity)
        try:
            yield key
        finally:
            self._release(key, identity)

    def _release(self, key: LeasedKey, identity: SigningIdentity) -> None:
        try:
            self.keys.release(key, identity)
        except AssetManagerError as e:
            KEY_RELEASE_FAILURES_TOTAL.inc()
            log.error("Failed to release leased key", address=key.address, error=str(e))
        except Exception:
            KEY_RELEASE_FAILURES_TOTAL.inc()
            log.exception("Unexpected error while releasing leased key", address=key.address)

    def network_params(self) -> NetworkParams:
        try:
            return self.ledger.suggested_params()
        except ServiceError as e:
            raise NodeQueryError(f"Could not fetch network parameters: {e}") from e

    def create_asset(
        self,
        spec: AssetSpec,
        identity: SigningIdentity,
        timeout: Optional[float] = None,
        cancel_event: Optional[Event] = None,
    ) -> CreatedAsset:
        """Create the asset described by `spec`, signed by `identity`.

        If `spec` names no creator, the leased key's address is used. The new
        asset is recorded with the registry only after the whole run succeeded.
        """
        with self._track("create"):
            with self.leased_key(identity) as key:
                if not spec.creator_address:
                    spec = dataclasses.replace(spec, creator_address=key.address)
                txn = build_create(spec, self.network_params())
                tx_id = submit(txn, key, self.ledger)
                result = self._await(tx_id, timeout, cancel_event)
                asset_id = self.discover_asset_id(spec.creator_address, result)

            log.info("Asset created", asset_id=asset_id, tx_id=tx_id, creator=spec.creator_address)
            if self.registry is not None:
                try:
                    self.registry.record_asset(spec.creator_address, asset_id)
                except AssetStoreError as e:
                    raise AssetRecordError(
                        f"Asset {asset_id} was created, but could not be recorded: {e}",
                        tx_id=tx_id,
                        asset_id=asset_id,
                    ) from e
            return CreatedAsset(asset_id=asset_id, tx_id=tx_id, confirmed_round=result.confirmed_round)

    def destroy_asset(
        self,
        asset_id: int,
        identity: SigningIdentity,
        manager_address: Optional[str] = None,
        timeout: Optional[float] = None,
        cancel_event: Optional[Event] = None,
    ) -> DestroyedAsset:
        """Destroy asset `asset_id`, signed by `identity`.

        `manager_address` defaults to the leased key's address; if given, it
        must belong to `identity`, otherwise signing fails.
        """
        with self._track("destroy"):
            with self.leased_key(identity) as key:
                txn = build_destroy(asset_id, manager_address or key.address, self.network_params())
                tx_id = submit(txn, key, self.ledger)
                result = self._await(tx_id, timeout, cancel_event)

            log.info("Asset destroyed", asset_id=asset_id, tx_id=tx_id)
            return DestroyedAsset(asset_id=asset_id, tx_id=tx_id, confirmed_round=result.confirmed_round)

    def _await(self, tx_id, timeout, cancel_event) -> ConfirmationResult:
        if timeout is None:
            timeout = self.confirmation_timeout
        return self.waiter.wait(tx_id, timeout=timeout, cancel_event=cancel_event)

    def discover_asset_id(self, creator: str, result: ConfirmationResult) -> int:
        """Return the id of the asset created by the confirmed transaction.

        The node reports it as the transaction's `asset-index`. Should it not,
        we fall back to the highest id among the assets created by `creator`,
        which is only correct as long as `creator` is not creating other
        assets concurrently.

        :raises AssetDiscoveryError: if neither yields an id.
        """
        if result.asset_index:
            return result.asset_index

        log.warning("No asset index in confirmed transaction, checking creator", tx_id=result.tx_id)
        try:
            account = self.ledger.account_info(creator)
        except ServiceError as e:
            raise AssetDiscoveryError(f"Could not fetch account {creator}: {e}", tx_id=result.tx_id) from e

        asset_ids = [asset["index"] for asset in account.get("created-assets") or []]
        if not asset_ids:
            raise AssetDiscoveryError(f"Account {creator} holds no created assets", tx_id=result.tx_id)
        return max(asset_ids)

    @contextmanager
    def _track(self, operation: str):
        try:
            yield
        except AssetManagerError as e:
            ASSET_OPERATIONS_TOTAL.labels(operation, e.kind).inc()
            log.error(f"Asset {operation} failed", kind=e.kind, tx_id=e.tx_id, error=str(e))
            raise
        else:
            ASSET_OPERATIONS_TOTAL.labels(operation, "success").inc()
