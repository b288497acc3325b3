from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

import structlog

from asset_manager.exceptions.config import ConfigurationError

log = structlog.get_logger(__name__)

#: Options whose values must never end up in logs or tracebacks.
SECRET_OPTIONS = frozenset(["token", "password", "mnemonic"])


class ConfigMapping(Mapping):
    """Read-only view of one section of the loaded YAML configuration.

    Sub-classes set :attr:`SECTION` to the top-level key they represent; the
    base class itself wraps whatever mapping it is given. A missing or empty
    section is treated as ``{}``, so :meth:`validate` decides what is required.
    """

    CONFIGURATION_ERROR = ConfigurationError

    #: Top-level key of the section, or `None` for the whole file.
    SECTION: Optional[str] = None

    def __init__(self, loaded_config: Optional[Mapping]):
        loaded_config = loaded_config or {}
        if self.SECTION is not None:
            loaded_config = loaded_config.get(self.SECTION) or {}
        if not isinstance(loaded_config, Mapping):
            name = self.SECTION or "configuration"
            raise self.CONFIGURATION_ERROR(f"'{name}' must be a mapping, not {type(loaded_config).__name__}!")
        self.dict = loaded_config

    def __getitem__(self, item):
        return self.dict[item]

    def __iter__(self):
        return iter(self.dict)

    def __len__(self):
        return len(self.dict)

    def __eq__(self, other):
        if isinstance(other, ConfigMapping):
            return self.dict == other.dict
        if isinstance(other, Mapping):
            return self.dict == other
        return NotImplemented

    def __repr__(self):
        redacted = {k: "***" if k in SECRET_OPTIONS else v for k, v in self.dict.items()}
        return f"{self.__class__.__qualname__}({redacted})"

    __str__ = __repr__

    def option(self, key: str, default: Any = None, cast: Optional[Callable] = None) -> Any:
        """Return the value of `key`, converted by `cast` if one is given.

        :raises ConfigurationError: if the value cannot be converted.
        """
        value = self.dict.get(key, default)
        if cast is None or value is None:
            return value
        try:
            return cast(value)
        except (TypeError, ValueError) as e:
            prefix = f"{self.SECTION}." if self.SECTION else ""
            raise self.CONFIGURATION_ERROR(f"'{prefix}{key}' has an invalid value: {value!r}") from e

    @classmethod
    def assert_option(cls, expression, err: Optional[Union[str, Exception]] = None):
        """Wrap `assert` to raise a ConfigurationError instead of an AssertionError."""
        try:
            assert expression
        except AssertionError as e:
            if err is None or isinstance(err, str):
                raise cls.CONFIGURATION_ERROR(err) from e
            raise err from e

    def validate(self):
        """Validate the configuration.

        Assert that all required keys are present and have sensible values.
        """
