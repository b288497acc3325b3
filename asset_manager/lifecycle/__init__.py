"""The asset lifecycle: lease a key, build, sign, broadcast, confirm, release."""
from asset_manager.lifecycle.confirmation import ConfirmationWaiter
from asset_manager.lifecycle.keys import KeyLeaseManager
from asset_manager.lifecycle.orchestrator import AssetLifecycleOrchestrator
from asset_manager.lifecycle.types import (
    AssetSpec,
    ConfirmationResult,
    CreatedAsset,
    DestroyedAsset,
    LeasedKey,
    NetworkParams,
    SignedTransaction,
    SigningIdentity,
)

__all__ = [
    "AssetLifecycleOrchestrator",
    "AssetSpec",
    "ConfirmationResult",
    "ConfirmationWaiter",
    "CreatedAsset",
    "DestroyedAsset",
    "KeyLeaseManager",
    "LeasedKey",
    "NetworkParams",
    "SignedTransaction",
    "SigningIdentity",
]
