from asset_manager.utils.configuration.settings import (
    AlgodConfig,
    AssetManagerConfig,
    ConfirmationConfig,
    KMDConfig,
    RedisConfig,
    ServiceConfig,
    WalletConfig,
)

__all__ = [
    "AlgodConfig",
    "AssetManagerConfig",
    "ConfirmationConfig",
    "KMDConfig",
    "RedisConfig",
    "ServiceConfig",
    "WalletConfig",
]
