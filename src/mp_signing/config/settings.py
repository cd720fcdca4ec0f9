"""Config – signing settings and the environment loader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, ClassVar, TypeVar

from mp_signing.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_signing.signing.keys import DEFAULT_MIN_KEY_BITS

# floor for min_key_bits; smaller RSA keys are never accepted
_ABSOLUTE_MIN_KEY_BITS = 1024


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SigningSettings(Settings):
    """Knobs of the webhook signing facade.

    ``SIGNING_MIN_KEY_BITS``, ``SIGNING_SIGNATURE_HEADER`` and
    ``SIGNING_TIMESTAMP_HEADER`` when loaded from the environment.
    """

    _prefix: ClassVar[str] = "SIGNING"

    min_key_bits: int = DEFAULT_MIN_KEY_BITS
    signature_header: str = "X-SIGNATURE"
    timestamp_header: str = "X-TIMESTAMP"

    def _validate(self) -> None:
        if self.min_key_bits < _ABSOLUTE_MIN_KEY_BITS:
            raise InvalidSettingValueError(
                "min_key_bits", self.min_key_bits, f"must be >= {_ABSOLUTE_MIN_KEY_BITS}"
            )
        for name in ("signature_header", "timestamp_header"):
            if not getattr(self, name).strip():
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")


T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables."""

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        return value


__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "SigningSettings"]
