"""Config – 12-factor settings, loaders, and validation errors."""

from mp_push.config.settings import EnvSettingsLoader, PushAdapterSettings, Settings, SettingsLoader
from mp_push.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PushAdapterSettings",
    "Settings",
    "SettingsLoader",
]
