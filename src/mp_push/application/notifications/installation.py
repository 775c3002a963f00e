"""Application notifications – installation records and device types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

__all__ = ["VALID_PUSH_TYPES", "DeviceType", "Installation"]


class DeviceType(str, Enum):
    """Device platforms the Firebase gateway can deliver to."""

    IOS = "ios"
    OSX = "osx"
    TVOS = "tvos"
    ANDROID = "android"
    FCM = "fcm"
    WEB = "web"


VALID_PUSH_TYPES: tuple[str, ...] = tuple(t.value for t in DeviceType)


@dataclass(frozen=True)
class Installation:
    """The three fields of a host installation record the adapter reads."""

    device_token: str | None
    device_type: str | None
    app_identifier: str | None = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> Installation:
        """Build from a host record keyed in camelCase or snake_case."""
        return cls(
            device_token=record.get("deviceToken", record.get("device_token")),
            device_type=record.get("deviceType", record.get("device_type")),
            app_identifier=record.get("appIdentifier", record.get("app_identifier")),
        )

    @classmethod
    def coerce(cls, value: Installation | Mapping[str, Any]) -> Installation:
        if isinstance(value, Installation):
            return value
        return cls.from_mapping(value)

    @property
    def platform(self) -> str | None:
        if isinstance(self.device_type, DeviceType):
            return self.device_type.value
        return self.device_type

    @property
    def is_eligible(self) -> bool:
        return self.platform in VALID_PUSH_TYPES and bool(self.device_token)

    def to_dict(self) -> dict[str, Any]:
        return {
            "deviceToken": self.device_token,
            "deviceType": self.platform,
            "appIdentifier": self.app_identifier,
        }
