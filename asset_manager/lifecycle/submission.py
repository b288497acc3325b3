"""Sign a transaction with a leased key and broadcast it.

Signing happens locally; the private key never leaves this process. Once
:func:`broadcast` returns, the transaction is visible to the network and
cannot be withdrawn, only reported on.
"""
import binascii

import structlog
from algosdk import account, encoding
from algosdk import error as sdk_error

from asset_manager.exceptions import BroadcastError, SigningError
from asset_manager.exceptions.services import ServiceError
from asset_manager.lifecycle.types import LeasedKey, SignedTransaction

log = structlog.get_logger(__name__)

_KEY_ERRORS = (binascii.Error, sdk_error.WrongKeyBytesLengthError, TypeError, ValueError)


def sign(txn, key: LeasedKey) -> SignedTransaction:
    """Sign `txn` with the leased private key.

    :raises SigningError: if the key does not belong to the transaction's sender,
        or is not a valid private key at all.
    """
    try:
        signer = account.address_from_private_key(key.private_key)
    except _KEY_ERRORS as e:
        raise SigningError(f"Leased key for {key.address} is not a valid private key") from e

    if signer != txn.sender:
        raise SigningError(f"Transaction sender {txn.sender} does not match signing key {signer}")

    try:
        signed = txn.sign(key.private_key)
    except _KEY_ERRORS as e:
        raise SigningError(f"Could not sign transaction: {e}") from e

    signed_txn = SignedTransaction(payload=encoding.msgpack_encode(signed), tx_id=signed.get_txid())
    log.debug("Signed transaction", tx_id=signed_txn.tx_id, sender=txn.sender)
    return signed_txn


def broadcast(signed_txn: SignedTransaction, ledger) -> str:
    """Send `signed_txn` to the ledger node and return its transaction id.

    :raises BroadcastError: if the node rejected the transaction or could not be reached.
    """
    try:
        tx_id = ledger.broadcast(signed_txn.payload)
    except ServiceError as e:
        raise BroadcastError(f"Node rejected transaction {signed_txn.tx_id}: {e}") from e

    if tx_id != signed_txn.tx_id:
        log.warning("Node reported an unexpected transaction id", local=signed_txn.tx_id, node=tx_id)
    log.info("Transaction broadcast", tx_id=tx_id)
    return tx_id or signed_txn.tx_id


def submit(txn, key: LeasedKey, ledger) -> str:
    """Sign `txn` with `key`, broadcast it via `ledger` and return the transaction id."""
    return broadcast(sign(txn, key), ledger)
