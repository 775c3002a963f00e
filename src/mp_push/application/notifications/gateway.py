"""Application notifications – push gateway port and in-memory fake."""
from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from mp_push.application.notifications.options import GatewayOptions
from mp_push.application.notifications.payload import GatewayPayload
from mp_push.application.notifications.resolution import GatewayResponse, TokenResult

__all__ = ["GatewayCall", "InMemoryPushGateway", "PushGateway"]


@runtime_checkable
class PushGateway(Protocol):
    """Port: deliver one batch of tokens to the cloud messaging gateway.

    Implementations return per-token results aligned with *tokens* and raise
    on transport-level failure.
    """

    async def send(
        self,
        tokens: Sequence[str],
        payload: GatewayPayload,
        options: GatewayOptions,
    ) -> GatewayResponse | Mapping[str, Any] | None: ...


@dataclass(frozen=True)
class GatewayCall:
    """One recorded :meth:`InMemoryPushGateway.send` invocation."""

    tokens: tuple[str, ...]
    payload: GatewayPayload
    options: GatewayOptions


class InMemoryPushGateway:
    """Fake PushGateway that records batches and reports success per token.

    ``token_errors`` maps tokens to the error the fake reports for them.
    ``fail_on_call`` makes the n-th call (1-based) raise ``failure``.
    """

    def __init__(
        self,
        token_errors: Mapping[str, str] | None = None,
        *,
        fail_on_call: int | None = None,
        failure: BaseException | None = None,
        delay: float = 0.0,
    ) -> None:
        self.calls: list[GatewayCall] = []
        self.token_errors = dict(token_errors or {})
        self.fail_on_call = fail_on_call
        self.failure = failure or ConnectionError("gateway unavailable")
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self._ids = itertools.count(1)

    async def send(
        self,
        tokens: Sequence[str],
        payload: GatewayPayload,
        options: GatewayOptions,
    ) -> GatewayResponse:
        self.calls.append(GatewayCall(tuple(tokens), payload, options))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
                raise self.failure
            results = tuple(
                TokenResult(error=self.token_errors[t])
                if t in self.token_errors
                else TokenResult(message_id=f"mem-msg-{next(self._ids)}")
                for t in tokens
            )
        finally:
            self.in_flight -= 1
        failures = sum(1 for r in results if not r.ok)
        return GatewayResponse(
            results=results,
            multicast_id=len(self.calls),
            failure_count=failures,
            success_count=len(results) - failures,
        )

    def reset(self) -> None:
        self.calls.clear()

    @property
    def count(self) -> int:
        return len(self.calls)
