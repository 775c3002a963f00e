"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self


@dataclasses.dataclass
class Settings:
    """Base class for settings dataclasses validated on construction.

    ``_prefix`` namespaces the environment variables read by the loaders and
    ``_aliases`` maps extra keys accepted by :meth:`from_mapping` (such as
    camelCase config keys) onto field names.
    """

    _prefix: ClassVar[str] = ""
    _aliases: ClassVar[Mapping[str, str]] = {}

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to check fields; raise a ConfigError subclass on failure."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> Self:
        """Build settings from a config mapping; unknown keys are ignored."""
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in config.items():
            name = cls._aliases.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


__all__ = ["Settings"]
