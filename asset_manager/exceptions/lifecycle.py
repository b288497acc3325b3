"""Errors surfaced by the asset lifecycle.

Every error carries a short :attr:`kind` used by the HTTP layer, and an
optional :attr:`tx_id`. The latter is set for any error raised after the
transaction was broadcast, since such a transaction may still land on the
ledger and must be reported, not silently dropped.
"""
from typing import Optional


class AssetManagerError(Exception):
    kind = "asset_manager_error"

    def __init__(self, message: str = "", tx_id: Optional[str] = None):
        self.tx_id = tx_id
        super(AssetManagerError, self).__init__(message)


class ValidationError(AssetManagerError):
    """The inbound request did not pass validation. Never reaches the lifecycle."""

    kind = "validation_error"

    def __init__(self, errors):
        self.errors = errors
        super(ValidationError, self).__init__(str(errors))


class WalletError(AssetManagerError):
    kind = "wallet_error"


class WalletNotFoundError(WalletError):
    """No wallet with the requested name exists in the key daemon."""

    def __init__(self, wallet_name: str):
        self.wallet_name = wallet_name
        super(WalletNotFoundError, self).__init__(f"No wallet named '{wallet_name}'")


class HandleError(WalletError):
    """The key daemon refused to open a handle for the wallet."""


class KeyImportError(WalletError):
    """The mnemonic could not be turned into a key, or the daemon rejected the import."""


class KeyReleaseError(WalletError):
    """Deleting a leased key from the wallet failed."""


class BuildError(AssetManagerError):
    kind = "build_error"


class InvalidParamsError(BuildError):
    """An address is malformed or a field violates the protocol's bounds."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super(InvalidParamsError, self).__init__(f"{field}: {reason}")


class SigningError(AssetManagerError):
    kind = "signing_error"


class BroadcastError(AssetManagerError):
    kind = "broadcast_error"


class NodeQueryError(AssetManagerError):
    kind = "node_query_error"


class ConfirmationTimeoutError(AssetManagerError):
    kind = "confirmation_timeout"

    def __init__(self, tx_id: str, timeout=None, message: str = None):
        self.timeout = timeout
        super(ConfirmationTimeoutError, self).__init__(
            message or f"Transaction {tx_id} not confirmed within {timeout}s", tx_id=tx_id
        )


class ConfirmationAbandoned(ConfirmationTimeoutError):
    """The caller cancelled the wait before the transaction was confirmed."""

    kind = "confirmation_abandoned"

    def __init__(self, tx_id: str):
        super(ConfirmationAbandoned, self).__init__(
            tx_id, message=f"Stopped waiting for transaction {tx_id}"
        )


class AssetDiscoveryError(AssetManagerError):
    """The creation was confirmed, but the new asset's id could not be determined."""

    kind = "asset_discovery_error"


class AssetRecordError(AssetManagerError):
    """The creation was confirmed, but the asset could not be recorded with the registry."""

    kind = "store_error"

    def __init__(self, message: str, tx_id: str, asset_id: int):
        self.asset_id = asset_id
        super(AssetRecordError, self).__init__(message, tx_id=tx_id)
