from asset_manager.exceptions.lifecycle import (
    AssetDiscoveryError,
    AssetManagerError,
    AssetRecordError,
    BroadcastError,
    BuildError,
    ConfirmationAbandoned,
    ConfirmationTimeoutError,
    HandleError,
    InvalidParamsError,
    KeyImportError,
    KeyReleaseError,
    NodeQueryError,
    SigningError,
    ValidationError,
    WalletError,
    WalletNotFoundError,
)

__all__ = [
    "AssetDiscoveryError",
    "AssetManagerError",
    "AssetRecordError",
    "BroadcastError",
    "BuildError",
    "ConfirmationAbandoned",
    "ConfirmationTimeoutError",
    "HandleError",
    "InvalidParamsError",
    "KeyImportError",
    "KeyReleaseError",
    "NodeQueryError",
    "SigningError",
    "ValidationError",
    "WalletError",
    "WalletNotFoundError",
]
