"""Adapter around the key management daemon's REST API (kmd v1)."""
from typing import List

from algosdk.error import KMDHTTPError
from algosdk.kmd import KMDClient

from asset_manager.clients.base import ServiceAdapter


class KeyDaemon(ServiceAdapter):
    """The wallet operations the key lease manager depends on."""

    SERVICE = "kmd"
    HTTP_ERRORS = (KMDHTTPError,)

    def __init__(self, client: KMDClient):
        self.client = client

    @classmethod
    def from_config(cls, config) -> "KeyDaemon":
        """Create an instance from a :class:`KMDConfig`."""
        return cls(KMDClient(config.token, config.address))

    def list_wallets(self) -> List[dict]:
        """Return all wallets as dicts with at least a `name` and an `id` key."""
        return self.call(self.client.list_wallets) or []

    def open_handle(self, wallet_id: str, password: str) -> str:
        return self.call(self.client.init_wallet_handle, wallet_id, password)

    def import_key(self, handle: str, private_key: str) -> str:
        """Import a base64 private key and return the address it belongs to."""
        return self.call(self.client.import_key, handle, private_key)

    def delete_key(self, handle: str, password: str, address: str) -> None:
        self.call(self.client.delete_key, handle, password, address)

    def release_handle(self, handle: str) -> None:
        self.call(self.client.release_wallet_handle, handle)
