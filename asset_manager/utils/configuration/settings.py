import os
from pathlib import Path
from typing import Optional, Union

import structlog
import yaml

from asset_manager.constants import (
    DEFAULT_CONFIRMATION_TIMEOUT,
    DEFAULT_SERVICE_PORT,
    DEFAULT_WALLET_NAME,
    MNEMONIC_ENV_VAR,
)
from asset_manager.exceptions.config import (
    AlgodConfigurationError,
    ConfigurationError,
    KMDConfigurationError,
    WalletConfigurationError,
)
from asset_manager.lifecycle.types import SigningIdentity
from asset_manager.utils.configuration.base import ConfigMapping

log = structlog.get_logger(__name__)


class ServiceEndpointConfig(ConfigMapping):
    """Address and API token of an external service.

    Example configuration section::

        algod:
          address: http://localhost:4001
          token: aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa
    """

    def validate(self):
        self.assert_option(self.address, f"'{self.SECTION}.address' is required!")

    @property
    def address(self) -> Optional[str]:
        return self.option("address")

    @property
    def token(self) -> str:
        return self.option("token", "", cast=str)


class AlgodConfig(ServiceEndpointConfig):
    CONFIGURATION_ERROR = AlgodConfigurationError
    SECTION = "algod"

    @property
    def headers(self) -> Optional[dict]:
        """Additional headers, i.e. for hosted nodes expecting an `X-API-Key`."""
        return self.option("headers", cast=dict)


class KMDConfig(ServiceEndpointConfig):
    CONFIGURATION_ERROR = KMDConfigurationError
    SECTION = "kmd"


class WalletConfig(ConfigMapping):
    """The wallet keys are leased into, and the mnemonic of the signing account.

    The mnemonic is read from the ``ASSET_MANAGER_MNEMONIC`` environment
    variable if it is not part of the configuration file.

    Example configuration section::

        wallet:
          name: unencrypted-default-wallet
          password: ""
    """

    CONFIGURATION_ERROR = WalletConfigurationError
    SECTION = "wallet"

    def validate(self):
        self.assert_option(self.name, "'wallet.name' must not be empty!")
        self.assert_option(
            self.mnemonic, f"No mnemonic given in 'wallet.mnemonic' or ${MNEMONIC_ENV_VAR}!"
        )

    @property
    def name(self) -> str:
        return self.option("name", DEFAULT_WALLET_NAME)

    @property
    def password(self) -> str:
        return self.option("password", "", cast=str)

    @property
    def mnemonic(self) -> Optional[str]:
        return self.option("mnemonic") or os.environ.get(MNEMONIC_ENV_VAR)

    @property
    def identity(self) -> SigningIdentity:
        return SigningIdentity(
            mnemonic=self.mnemonic, wallet_name=self.name, wallet_password=self.password
        )


class RedisConfig(ConfigMapping):
    SECTION = "redis"

    @property
    def host(self) -> str:
        return self.option("host", "127.0.0.1")

    @property
    def port(self) -> int:
        return self.option("port", 6379, cast=int)

    @property
    def db(self) -> int:
        return self.option("db", 0, cast=int)

    @property
    def table(self) -> str:
        return self.option("table", "assets")


class ConfirmationConfig(ConfigMapping):
    SECTION = "confirmation"

    def validate(self):
        timeout = self.timeout
        self.assert_option(
            timeout is not None and timeout > 0, "'confirmation.timeout' must be greater than 0!"
        )

    @property
    def timeout(self) -> float:
        return self.option("timeout", DEFAULT_CONFIRMATION_TIMEOUT, cast=float)


class ServiceConfig(ConfigMapping):
    """Where the HTTP service listens. Overridden by the `serve` command's options."""

    SECTION = "service"

    @property
    def host(self) -> str:
        return self.option("host", "127.0.0.1")

    @property
    def port(self) -> int:
        return self.option("port", DEFAULT_SERVICE_PORT, cast=int)


class AssetManagerConfig(ConfigMapping):
    """Interface to the full configuration file.

    Example::

        algod: {address: "http://localhost:4001", token: "..."}
        kmd: {address: "http://localhost:4002", token: "..."}
        wallet: {name: "unencrypted-default-wallet", password: ""}
        confirmation: {timeout: 120}
        redis: {host: 127.0.0.1, port: 6379}
        service: {host: 127.0.0.1, port: 5100}
    """

    def __init__(self, loaded_config: dict):
        super(AssetManagerConfig, self).__init__(loaded_config)
        self.algod = AlgodConfig(self.dict)
        self.kmd = KMDConfig(self.dict)
        self.wallet = WalletConfig(self.dict)
        self.redis = RedisConfig(self.dict)
        self.confirmation = ConfirmationConfig(self.dict)
        self.service = ServiceConfig(self.dict)
        self.validate()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AssetManagerConfig":
        try:
            with open(path, "r") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not load configuration from {path}: {e}") from e
        log.debug("Loaded configuration", path=str(path))
        return cls(loaded or {})

    def validate(self):
        for section in (self.algod, self.kmd, self.wallet, self.redis, self.confirmation, self.service):
            section.validate()

    @property
    def confirmation_timeout(self) -> float:
        return self.confirmation.timeout

    @property
    def service_host(self) -> str:
        return self.service.host

    @property
    def service_port(self) -> int:
        return self.service.port
