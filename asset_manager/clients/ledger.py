"""Adapter around the ledger node's REST API (algod v2)."""
from typing import Optional

import structlog
from algosdk.error import AlgodHTTPError
from algosdk.v2client.algod import AlgodClient

from asset_manager.clients.base import ServiceAdapter
from asset_manager.lifecycle.types import NetworkParams

log = structlog.get_logger(__name__)


class LedgerNode(ServiceAdapter):
    """The ledger node operations the asset lifecycle depends on.

    All methods raise :exc:`asset_manager.exceptions.services.ServiceError`
    subclasses on failure.
    """

    SERVICE = "algod"
    HTTP_ERRORS = (AlgodHTTPError,)

    def __init__(self, client: AlgodClient):
        self.client = client

    @classmethod
    def from_config(cls, config) -> "LedgerNode":
        """Create an instance from an :class:`AlgodConfig`."""
        return cls(AlgodClient(config.token, config.address, headers=config.headers))

    def suggested_params(self) -> NetworkParams:
        """Fetch the network parameters for a new transaction.

        Only the first-valid round is taken from the node; the last-valid
        round is derived by :class:`NetworkParams` itself.
        """
        sp = self.call(self.client.suggested_params)
        return NetworkParams(
            fee=sp.fee,
            first_valid=sp.first,
            genesis_id=sp.gen,
            genesis_hash=sp.gh,
            flat_fee=sp.flat_fee,
        )

    def broadcast(self, payload: str) -> str:
        """Send a base64 encoded, signed transaction as raw bytes.

        The SDK posts the decoded bytes with `Content-Type: application/x-binary`.
        """
        return self.call(self.client.send_raw_transaction, payload)

    def pending_transaction(self, tx_id: str) -> dict:
        return self.call(self.client.pending_transaction_info, tx_id)

    def status(self) -> dict:
        return self.call(self.client.status)

    def wait_for_round(self, round_number: int) -> dict:
        """Block until the node reports that `round_number` has started."""
        return self.call(self.client.status_after_block, round_number)

    def account_info(self, address: str, exclude: Optional[str] = None) -> dict:
        if exclude:
            return self.call(self.client.account_info, address, exclude=exclude)
        return self.call(self.client.account_info, address)
