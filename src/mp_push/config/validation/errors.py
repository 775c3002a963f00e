"""Config validation errors raised while building push adapter settings."""
from __future__ import annotations

from mp_push.kernel.errors import ApplicationError
from mp_push.observability.logging.filters import SensitiveFieldsFilter


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required setting is absent or empty.

    ``env_key`` names the environment variable that would supply it, when known.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str | None = None) -> None:
        hint = f" (set {env_key})" if env_key else ""
        super().__init__(
            f"Required setting '{setting_name}' is missing{hint}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but unusable.

    With ``secret=True`` the value never reaches the message or the error
    object, so credentials cannot leak through tracebacks or logs.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, secret: bool = False) -> None:
        shown = SensitiveFieldsFilter.REDACTED if secret else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = None if secret else value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
