"""Application notifications – gateway responses and per-device resolutions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from mp_push.application.notifications.installation import Installation

__all__ = ["GatewayResponse", "Resolution", "TokenResult", "reduce_response"]


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class TokenResult:
    """Gateway outcome for one token: a message id on success, an error otherwise."""

    message_id: str | None = None
    error: Any = None
    canonical_registration_token: str | None = None

    @property
    def ok(self) -> bool:
        return not self.error

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> TokenResult:
        return cls(
            message_id=_pick(raw, "messageId", "message_id"),
            error=raw.get("error"),
            canonical_registration_token=_pick(
                raw, "canonicalRegistrationToken", "canonical_registration_token", "registration_id"
            ),
        )

    @classmethod
    def coerce(cls, value: TokenResult | Mapping[str, Any] | None) -> TokenResult | None:
        if value is None or isinstance(value, TokenResult):
            return value
        return cls.from_mapping(value)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.message_id is not None:
            result["messageId"] = self.message_id
        if self.error is not None:
            result["error"] = self.error if isinstance(self.error, (str, dict)) else str(self.error)
        if self.canonical_registration_token is not None:
            result["canonicalRegistrationToken"] = self.canonical_registration_token
        return result


@dataclass(frozen=True)
class GatewayResponse:
    """One batch's response: per-token ``results`` aligned to the sent tokens plus counters."""

    results: tuple[TokenResult | None, ...] | None = None
    multicast_id: str | int | None = None
    canonical_registration_token_count: int = 0
    failure_count: int = 0
    success_count: int = 0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> GatewayResponse:
        results = raw.get("results")
        return cls(
            results=tuple(TokenResult.coerce(r) for r in results) if results is not None else None,
            multicast_id=_pick(raw, "multicastId", "multicast_id"),
            canonical_registration_token_count=_pick(
                raw, "canonicalRegistrationTokenCount", "canonical_registration_token_count"
            ) or 0,
            failure_count=_pick(raw, "failureCount", "failure_count") or 0,
            success_count=_pick(raw, "successCount", "success_count") or 0,
        )

    @classmethod
    def coerce(cls, value: GatewayResponse | Mapping[str, Any] | None) -> GatewayResponse:
        if isinstance(value, GatewayResponse):
            return value
        return cls.from_mapping(value or {})

    def result_at(self, index: int) -> TokenResult | None:
        if not self.results or index < 0 or index >= len(self.results):
            return None
        return self.results[index]

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": (
                [r.to_dict() if r is not None else None for r in self.results]
                if self.results is not None
                else None
            ),
            "multicastId": self.multicast_id,
            "canonicalRegistrationTokenCount": self.canonical_registration_token_count,
            "failureCount": self.failure_count,
            "successCount": self.success_count,
        }


@dataclass(frozen=True)
class Resolution:
    """Normalised outcome for one installation."""

    device: Installation
    multicast_id: str | int | None
    canonical_registration_token_count: int
    failure_count: int
    success_count: int
    response: TokenResult | None
    transmitted: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "device": self.device.to_dict(),
            "multicastId": self.multicast_id,
            "canonicalRegistrationTokenCount": self.canonical_registration_token_count,
            "failureCount": self.failure_count,
            "successCount": self.success_count,
            "response": self.response.to_dict() if self.response is not None else None,
            "transmitted": self.transmitted,
        }


def reduce_response(
    response: GatewayResponse | Mapping[str, Any] | None,
    tokens: Sequence[str],
    installations: Sequence[Installation],
) -> list[Resolution]:
    """Build one :class:`Resolution` per installation, in installation order.

    Each installation's result is looked up by the position of its token in
    *tokens*; a missing response, missing results or an out-of-range position
    all yield ``response=None`` and ``transmitted=False``.
    """
    reply = GatewayResponse.coerce(response)
    positions: dict[str, int] = {}
    for index, token in enumerate(tokens):
        positions.setdefault(token, index)

    resolutions: list[Resolution] = []
    for installation in installations:
        result = reply.result_at(positions.get(installation.device_token, -1))  # type: ignore[arg-type]
        resolutions.append(
            Resolution(
                device=installation,
                multicast_id=reply.multicast_id,
                canonical_registration_token_count=reply.canonical_registration_token_count,
                failure_count=reply.failure_count,
                success_count=reply.success_count,
                response=result,
                transmitted=result is not None and result.ok,
            )
        )
    return resolutions
