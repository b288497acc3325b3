from asset_manager.services.assets.schemas.assets import (
    AssetCreateRequest,
    AssetDestroyRequest,
    AssetListRequest,
)

__all__ = ["AssetCreateRequest", "AssetDestroyRequest", "AssetListRequest"]
