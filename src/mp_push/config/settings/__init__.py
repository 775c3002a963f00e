"""Config settings – 12-factor env-based configuration."""
from mp_push.config.settings.base import Settings
from mp_push.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_push.config.settings.push import DEFAULT_MAX_TOKENS_PER_REQUEST, PushAdapterSettings

__all__ = [
    "DEFAULT_MAX_TOKENS_PER_REQUEST",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PushAdapterSettings",
    "Settings",
    "SettingsLoader",
]
