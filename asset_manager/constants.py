#: Number of rounds a transaction stays valid for, counted from the first-valid round.
VALID_ROUND_WINDOW = 1000

#: Protocol bounds for asset configuration fields.
MAX_UINT64 = 2 ** 64 - 1
MAX_ASSET_DECIMALS = 19
MAX_ASSET_NAME_BYTES = 32
MAX_UNIT_NAME_BYTES = 8
MAX_URL_BYTES = 96
METADATA_HASH_BYTES = 32

DEFAULT_CONFIRMATION_TIMEOUT = 120  # seconds
DEFAULT_SERVICE_PORT = 5100
DEFAULT_WALLET_NAME = "unencrypted-default-wallet"

#: Environment variable the signing mnemonic may be read from instead of the config file.
MNEMONIC_ENV_VAR = "ASSET_MANAGER_MNEMONIC"

#: The namespace plugins should use as a prefix when creating a :class:`pluggy.HookimplMarker`.
HOST_NAMESPACE = "asset_manager"
