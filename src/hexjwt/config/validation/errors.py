"""Config validation errors.

``setting_name`` is always the environment key (``JWT_SECRET``), see
:meth:`hexjwt.config.settings.Settings.setting_key`.
"""
from hexjwt.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default is absent from the environment."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable.

    The offending value is never echoed, since it may be the signing secret.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, reason: str) -> None:
        super().__init__(f"{setting_name} {reason}")
        self.setting_name = setting_name
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
