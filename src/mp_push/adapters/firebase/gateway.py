"""Firebase adapter – FirebaseAdminGateway."""
from __future__ import annotations

import asyncio
from typing import Any, Sequence

import firebase_admin
from firebase_admin import credentials, exceptions, messaging

from mp_push.adapters.firebase.messages import MULTICAST_LIMIT, build_multicast_message
from mp_push.application.notifications.options import GatewayOptions
from mp_push.application.notifications.payload import GatewayPayload
from mp_push.application.notifications.resolution import GatewayResponse, TokenResult
from mp_push.config.settings import PushAdapterSettings
from mp_push.config.validation import InvalidSettingValueError
from mp_push.kernel.errors import GatewayTransportError
from mp_push.kernel.time import Clock, SystemClock

__all__ = ["FirebaseAdminGateway"]

_SERVICE = "firebase-cloud-messaging"


def _token_result(response: messaging.SendResponse) -> TokenResult:
    if response.success:
        return TokenResult(message_id=response.message_id)
    exc = response.exception
    code = getattr(exc, "code", None)
    return TokenResult(error=f"{code}: {exc}" if code else str(exc))


class FirebaseAdminGateway:
    """PushGateway that sends through ``firebase_admin.messaging``.

    A batch larger than :data:`MULTICAST_LIMIT` is split into several
    multicast requests, sent one after another, and merged back into one
    :class:`GatewayResponse` whose results stay aligned with the tokens.
    """

    def __init__(
        self,
        app: firebase_admin.App,
        *,
        dry_run: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self._app = app
        self._dry_run = dry_run
        self._clock = clock or SystemClock()

    @classmethod
    def from_settings(cls, settings: PushAdapterSettings, **kwargs: Any) -> FirebaseAdminGateway:
        """Initialise (or reuse) the firebase app named ``settings.app_name``."""
        try:
            app = firebase_admin.get_app(settings.app_name)
        except ValueError:
            try:
                cred = credentials.Certificate(settings.credential_source())
            except (OSError, ValueError) as exc:
                raise InvalidSettingValueError(
                    "service_account_key", settings.service_account_key, str(exc), secret=True
                ) from exc
            app = firebase_admin.initialize_app(
                cred, {"databaseURL": settings.database_url}, name=settings.app_name
            )
        return cls(app, **kwargs)

    @property
    def app(self) -> firebase_admin.App:
        return self._app

    async def send(
        self,
        tokens: Sequence[str],
        payload: GatewayPayload,
        options: GatewayOptions,
    ) -> GatewayResponse:
        sent_at = int(self._clock.timestamp())
        results: list[TokenResult | None] = []
        success_count = failure_count = 0
        for start in range(0, len(tokens), MULTICAST_LIMIT):
            chunk = tokens[start:start + MULTICAST_LIMIT]
            batch = await self._send_multicast(chunk, payload, options, sent_at)
            results.extend(_token_result(r) for r in batch.responses)
            success_count += batch.success_count
            failure_count += batch.failure_count
        return GatewayResponse(
            results=tuple(results),
            success_count=success_count,
            failure_count=failure_count,
        )

    async def _send_multicast(
        self,
        tokens: Sequence[str],
        payload: GatewayPayload,
        options: GatewayOptions,
        sent_at: int,
    ) -> messaging.BatchResponse:
        try:
            message = build_multicast_message(tokens, payload, options, sent_at=sent_at)
            return await asyncio.to_thread(
                messaging.send_each_for_multicast, message, dry_run=self._dry_run, app=self._app
            )
        except exceptions.FirebaseError as exc:
            raise GatewayTransportError(
                _SERVICE, f"{exc.code}: {exc}", batch_size=len(tokens), cause=exc
            ) from exc
        except ValueError as exc:
            raise GatewayTransportError(
                _SERVICE, f"invalid multicast message: {exc}", batch_size=len(tokens), cause=exc
            ) from exc
