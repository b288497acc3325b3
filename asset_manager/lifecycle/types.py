from dataclasses import dataclass, field
from typing import Optional, Union

from asset_manager.constants import VALID_ROUND_WINDOW


@dataclass(frozen=True)
class AssetSpec:
    """Parameters of an asset to create.

    Role addresses left empty are omitted from the transaction, which
    permanently disables the respective role on the ledger. An empty
    `creator_address` is filled in with the address of the leased key.
    """

    asset_name: str
    unit_name: str
    total: int
    decimals: int = 0
    default_frozen: bool = False
    url: str = ""
    metadata_hash: Union[str, bytes, None] = None
    creator_address: str = ""
    manager_address: str = ""
    reserve_address: str = ""
    freeze_address: str = ""
    clawback_address: str = ""


@dataclass(frozen=True)
class NetworkParams:
    """Network parameters for a single transaction.

    Never cache these; a stale `first_valid` risks signing a transaction
    whose validity window has already passed.
    """

    fee: int
    first_valid: int
    genesis_id: str
    genesis_hash: str
    flat_fee: bool = False

    @property
    def last_valid(self) -> int:
        return self.first_valid + VALID_ROUND_WINDOW


@dataclass(frozen=True)
class SigningIdentity:
    """Who signs: the account mnemonic plus the kmd wallet the key is leased into."""

    mnemonic: str = field(repr=False)
    wallet_name: str
    wallet_password: str = field(default="", repr=False)


@dataclass(frozen=True)
class LeasedKey:
    wallet_handle: str
    address: str
    private_key: str = field(repr=False)


@dataclass(frozen=True)
class SignedTransaction:
    #: base64 encoded msgpack of the signed transaction.
    payload: str = field(repr=False)
    tx_id: str


@dataclass(frozen=True)
class ConfirmationResult:
    confirmed_round: int
    tx_id: str
    #: Index of the asset created by the transaction, if the node reported one.
    asset_index: Optional[int] = None

    @property
    def confirmed(self) -> bool:
        return self.confirmed_round > 0


@dataclass(frozen=True)
class CreatedAsset:
    asset_id: int
    tx_id: str
    confirmed_round: int = 0


@dataclass(frozen=True)
class DestroyedAsset:
    asset_id: int
    tx_id: str
    confirmed_round: int = 0
