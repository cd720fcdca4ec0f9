"""Config – settings and loaders."""

from mp_signing.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_signing.config.settings import (
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    SigningSettings,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "SigningSettings",
]
