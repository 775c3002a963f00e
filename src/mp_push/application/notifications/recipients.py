"""Application notifications – recipient filtering."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from mp_push.application.notifications.installation import Installation

__all__ = ["valid_installations", "valid_tokens"]


def valid_installations(
    installations: Iterable[Installation | Mapping[str, Any]],
) -> list[Installation]:
    """Keep installations with a supported device type and a non-empty token, in order."""
    return [i for i in map(Installation.coerce, installations) if i.is_eligible]


def valid_tokens(installations: Iterable[Installation | Mapping[str, Any]]) -> list[str]:
    """Device tokens of :func:`valid_installations`, in the same order."""
    return [i.device_token for i in valid_installations(installations)]  # type: ignore[misc]
