"""Config – 12-factor settings and loaders."""

from hexjwt.config.settings import EnvSettingsLoader, Settings, SettingsLoader, TokenSettings
from hexjwt.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "TokenSettings",
]
