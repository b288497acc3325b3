import gevent
import pytest
from algosdk import account, encoding, mnemonic

from asset_manager.exceptions.services import ServiceResponseError
from asset_manager.lifecycle import (
    AssetLifecycleOrchestrator,
    AssetSpec,
    KeyLeaseManager,
    NetworkParams,
    SigningIdentity,
)
from asset_manager.services.assets.registry import AssetRegistry
from asset_manager.services.utils.testing import TestRedis

WALLET_NAME = "test-wallet"
WALLET_PASSWORD = "test-password"


class FakeKeyDaemon:
    """In-memory stand-in for :class:`asset_manager.clients.KeyDaemon`.

    Operations listed in `fail_on` raise a :exc:`ServiceResponseError`.
    """

    def __init__(self, wallets=None):
        if wallets is None:
            wallets = [{"name": "other-wallet", "id": "other-id"}, {"name": WALLET_NAME, "id": "wallet-id"}]
        self.wallets = wallets
        self.keys = {}
        self.opened_handles = []
        self.released_handles = []
        self.imported = []
        self.deleted = []
        self.fail_on = set()

    def _maybe_fail(self, operation):
        if operation in self.fail_on:
            raise ServiceResponseError("kmd", f"{operation} failed", 500)

    def list_wallets(self):
        self._maybe_fail("list_wallets")
        return list(self.wallets)

    def open_handle(self, wallet_id, password):
        self._maybe_fail("open_handle")
        handle = f"handle-{wallet_id}-{len(self.opened_handles)}"
        self.opened_handles.append(handle)
        return handle

    def import_key(self, handle, private_key):
        self._maybe_fail("import_key")
        address = account.address_from_private_key(private_key)
        self.keys[address] = private_key
        self.imported.append(address)
        return address

    def delete_key(self, handle, password, address):
        self._maybe_fail("delete_key")
        self.keys.pop(address, None)
        self.deleted.append(address)

    def release_handle(self, handle):
        self.released_handles.append(handle)


class FakeLedger:
    """In-memory stand-in for :class:`asset_manager.clients.LedgerNode`.

    A broadcast transaction is confirmed `confirm_after` rounds after it was
    sent; `None` means it is never confirmed. Every :meth:`wait_for_round`
    call advances the ledger by one round.
    """

    def __init__(self, params: NetworkParams, confirm_after=1, asset_index=1234):
        self.params = params
        self.last_round = params.first_valid
        self.confirm_after = confirm_after
        self.asset_index = asset_index
        self.assets = set()
        self.created_assets = []
        self.broadcasts = []
        self.broadcast_round = {}
        self.pending_calls = 0
        self.pending_failures = 0
        self.waited_rounds = []
        self.fail_on = set()

    def _maybe_fail(self, operation):
        if operation in self.fail_on:
            raise ServiceResponseError("algod", f"{operation} failed", 400)

    def suggested_params(self):
        self._maybe_fail("suggested_params")
        return self.params

    def broadcast(self, payload):
        self._maybe_fail("broadcast")
        signed = encoding.msgpack_decode(payload)
        index = getattr(signed.transaction, "index", None)
        if index:
            if index not in self.assets:
                raise ServiceResponseError("algod", f"asset {index} does not exist or has been deleted", 400)
            self.assets.discard(index)
        elif self.asset_index:
            self.assets.add(self.asset_index)

        tx_id = signed.get_txid()
        self.broadcasts.append(tx_id)
        self.broadcast_round[tx_id] = self.last_round
        return tx_id

    def pending_transaction(self, tx_id):
        self.pending_calls += 1
        if self.pending_failures:
            self.pending_failures -= 1
            raise ServiceResponseError("algod", "pending query failed", 500)
        self._maybe_fail("pending_transaction")

        sent = self.broadcast_round[tx_id]
        if self.confirm_after is not None and self.last_round >= sent + self.confirm_after:
            info = {"confirmed-round": self.last_round, "pool-error": ""}
            if self.asset_index:
                info["asset-index"] = self.asset_index
            return info
        return {"confirmed-round": 0, "pool-error": ""}

    def status(self):
        self._maybe_fail("status")
        return {"last-round": self.last_round}

    def wait_for_round(self, round_number):
        self._maybe_fail("wait_for_round")
        gevent.sleep(0.01)
        self.waited_rounds.append(round_number)
        self.last_round = max(self.last_round, round_number)
        return {"last-round": self.last_round}

    def account_info(self, address):
        self._maybe_fail("account_info")
        return {"address": address, "created-assets": [{"index": i} for i in self.created_assets]}


@pytest.fixture
def signing_account():
    private_key, address = account.generate_account()
    return private_key, address


@pytest.fixture
def signing_address(signing_account):
    return signing_account[1]


@pytest.fixture
def other_address():
    return account.generate_account()[1]


@pytest.fixture
def identity(signing_account):
    private_key, _ = signing_account
    return SigningIdentity(
        mnemonic=mnemonic.from_private_key(private_key),
        wallet_name=WALLET_NAME,
        wallet_password=WALLET_PASSWORD,
    )


@pytest.fixture
def network_params():
    return NetworkParams(
        fee=1000,
        first_valid=5000,
        genesis_id="testnet-v1.0",
        genesis_hash="SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI=",
        flat_fee=True,
    )


@pytest.fixture
def asset_spec(signing_address):
    return AssetSpec(
        creator_address=signing_address,
        asset_name="Token",
        unit_name="TOK",
        total=1_000_000,
        decimals=2,
        default_frozen=False,
        manager_address=signing_address,
        reserve_address=signing_address,
        freeze_address=signing_address,
        clawback_address=signing_address,
    )


@pytest.fixture
def fake_kmd():
    return FakeKeyDaemon()


@pytest.fixture
def fake_ledger(network_params):
    return FakeLedger(network_params)


@pytest.fixture
def key_manager(fake_kmd):
    return KeyLeaseManager(fake_kmd)


@pytest.fixture
def test_redis():
    db = TestRedis("assets")
    yield db
    db.flush()


@pytest.fixture
def registry(test_redis):
    return AssetRegistry(test_redis, table="assets")


@pytest.fixture
def orchestrator(fake_ledger, key_manager, registry):
    return AssetLifecycleOrchestrator(fake_ledger, key_manager, registry=registry, confirmation_timeout=5)
