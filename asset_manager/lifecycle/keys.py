"""Lease signing keys from a kmd wallet.

A lease imports the key derived from a mnemonic into a named wallet and
hands back the key material; releasing it deletes the key from the wallet
again. The wallet is re-resolved on release, since the handle obtained
during :meth:`KeyLeaseManager.acquire` may have expired while the
transaction was waiting for confirmation.
"""
import structlog
from algosdk import error as sdk_error
from algosdk import mnemonic as sdk_mnemonic

from asset_manager.exceptions import (
    HandleError,
    KeyImportError,
    KeyReleaseError,
    WalletError,
    WalletNotFoundError,
)
from asset_manager.exceptions.services import ServiceError
from asset_manager.lifecycle.types import LeasedKey, SigningIdentity

log = structlog.get_logger(__name__)

_MNEMONIC_ERRORS = (
    sdk_error.WrongChecksumError,
    sdk_error.WrongMnemonicLengthError,
    sdk_error.WrongKeyBytesLengthError,
    AttributeError,
    KeyError,
    ValueError,
)


class KeyLeaseManager:
    """The only component touching wallet state in the key daemon.

    :param key_daemon: a :class:`asset_manager.clients.KeyDaemon`, or anything
        offering the same methods.
    """

    def __init__(self, key_daemon):
        self.kmd = key_daemon

    def resolve_wallet(self, wallet_name: str) -> str:
        """Return the id of the wallet called `wallet_name`.

        :raises WalletNotFoundError: if there is no such wallet.
        :raises WalletError: if the wallets could not be listed.
        """
        try:
            wallets = self.kmd.list_wallets()
        except ServiceError as e:
            raise WalletError(f"Could not list wallets: {e}") from e

        for wallet in wallets:
            if wallet.get("name") == wallet_name:
                log.debug("Resolved wallet", wallet_name=wallet_name, wallet_id=wallet["id"])
                return wallet["id"]
        raise WalletNotFoundError(wallet_name)

    def open_handle(self, identity: SigningIdentity) -> str:
        wallet_id = self.resolve_wallet(identity.wallet_name)
        try:
            return self.kmd.open_handle(wallet_id, identity.wallet_password)
        except ServiceError as e:
            raise HandleError(f"Could not open wallet '{identity.wallet_name}': {e}") from e

    def acquire(self, identity: SigningIdentity) -> LeasedKey:
        """Import the key of `identity` into its wallet and return the lease.

        :raises WalletNotFoundError, HandleError, KeyImportError:
            nothing is leased when any of these is raised.
        """
        try:
            private_key = sdk_mnemonic.to_private_key(identity.mnemonic)
        except _MNEMONIC_ERRORS as e:
            # Never include the mnemonic itself in the message.
            raise KeyImportError(f"Invalid mnemonic ({type(e).__name__})") from e

        handle = self.open_handle(identity)
        try:
            address = self.kmd.import_key(handle, private_key)
        except ServiceError as e:
            self._release_handle(handle)
            raise KeyImportError(f"Key daemon rejected the key import: {e}") from e

        log.info("Leased signing key", address=address, wallet_name=identity.wallet_name)
        return LeasedKey(wallet_handle=handle, address=address, private_key=private_key)

    def release(self, key: LeasedKey, identity: SigningIdentity) -> None:
        """Delete the leased key's address from the wallet.

        :raises KeyReleaseError: if the key could not be deleted. The key may
            still be held by the daemon in this case.
        """
        try:
            handle = self.open_handle(identity)
        except WalletError as e:
            self._release_handle(key.wallet_handle)
            raise KeyReleaseError(f"Could not re-open wallet to release {key.address}: {e}") from e

        try:
            self.kmd.delete_key(handle, identity.wallet_password, key.address)
        except ServiceError as e:
            raise KeyReleaseError(f"Could not delete key {key.address}: {e}") from e
        finally:
            self._release_handle(handle)
            if key.wallet_handle != handle:
                self._release_handle(key.wallet_handle)

        log.info("Released signing key", address=key.address, wallet_name=identity.wallet_name)

    def _release_handle(self, handle: str) -> None:
        """Hand the wallet handle back. Handles expire on their own, so failure is only logged."""
        try:
            self.kmd.release_handle(handle)
        except ServiceError as e:
            log.debug("Could not release wallet handle", error=str(e))
