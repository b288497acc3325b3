class ConfigurationError(ValueError):
    """Generic error thrown if there was an error while reading the configuration file."""


class AlgodConfigurationError(ConfigurationError):
    """The `algod` section of the configuration is missing or invalid."""


class KMDConfigurationError(ConfigurationError):
    """The `kmd` section of the configuration is missing or invalid."""


class WalletConfigurationError(ConfigurationError):
    """The `wallet` section is invalid, or no mnemonic could be found for it."""
