"""Config settings – 12-factor env-based configuration."""
from hexjwt.config.settings.base import Settings
from hexjwt.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from hexjwt.config.settings.token import TokenSettings

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "TokenSettings"]
