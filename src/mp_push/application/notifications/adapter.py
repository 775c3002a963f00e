"""Application notifications – FirebasePushAdapter.

Turns a notification request and a list of installations into sequential
gateway batches and folds the per-token results back into one
:class:`Resolution` per eligible installation.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from mp_push.application.notifications.batching import Batch, partition
from mp_push.application.notifications.gateway import PushGateway
from mp_push.application.notifications.installation import VALID_PUSH_TYPES, Installation
from mp_push.application.notifications.options import GatewayOptions, generate_options
from mp_push.application.notifications.payload import GatewayPayload, generate_payload
from mp_push.application.notifications.recipients import valid_installations, valid_tokens
from mp_push.application.notifications.request import NotificationRequest
from mp_push.application.notifications.resolution import GatewayResponse, Resolution, reduce_response
from mp_push.config.settings import PushAdapterSettings
from mp_push.kernel.errors import BaseError
from mp_push.kernel.time import Clock, SystemClock, epoch_millis
from mp_push.observability.logging import get_logger

__all__ = ["FirebasePushAdapter"]


class FirebasePushAdapter:
    """Push adapter that delivers through a :class:`PushGateway`.

    Parameters
    ----------
    settings:
        :class:`PushAdapterSettings` or a push config mapping
        (``maxTokensPerRequest``, ``serviceAccountKey``, ``databaseURL``).
        Missing credential or database URL raises
        :class:`~mp_push.config.validation.MissingRequiredSettingError`.
    gateway:
        Transport used for every batch.  Defaults to a
        :class:`~mp_push.adapters.firebase.FirebaseAdminGateway` built from
        *settings*.
    clock:
        Source of the send timestamp used for time-to-live.
    logger:
        structlog-style logger; debug events are only emitted when
        ``settings.verbose`` is set.
    """

    def __init__(
        self,
        settings: PushAdapterSettings | Mapping[str, Any],
        *,
        gateway: PushGateway | None = None,
        clock: Clock | None = None,
        logger: Any = None,
    ) -> None:
        if not isinstance(settings, PushAdapterSettings):
            settings = PushAdapterSettings.from_mapping(settings)
        self._settings = settings
        self._clock = clock or SystemClock()
        self._logger = logger or get_logger(__name__, adapter="firebase-push-adapter")
        if gateway is None:
            from mp_push.adapters.firebase import FirebaseAdminGateway  # noqa: PLC0415

            gateway = FirebaseAdminGateway.from_settings(settings)
        self._gateway = gateway

    @property
    def settings(self) -> PushAdapterSettings:
        return self._settings

    @property
    def max_tokens_per_request(self) -> int:
        return self._settings.max_tokens_per_request

    def get_valid_push_types(self) -> tuple[str, ...]:
        return VALID_PUSH_TYPES

    def valid_installations(self, installations: Iterable[Installation | Mapping[str, Any]]) -> list[Installation]:
        return valid_installations(installations)

    def valid_tokens(self, installations: Iterable[Installation | Mapping[str, Any]]) -> list[str]:
        return valid_tokens(installations)

    async def send(
        self,
        request: NotificationRequest | Mapping[str, Any],
        installations: Iterable[Installation | Mapping[str, Any]],
    ) -> list[Resolution]:
        """Send *request* to every eligible installation.

        Batches go out one at a time; the first gateway failure propagates
        and no resolutions are returned.
        """
        request = NotificationRequest.coerce(request)
        recipients = valid_installations(installations)
        tokens = [i.device_token for i in recipients]
        batches = partition(recipients, tokens, self.max_tokens_per_request)  # type: ignore[arg-type]

        timestamp = epoch_millis(self._clock)
        payload = generate_payload(request.data)
        options = generate_options(request.data, timestamp, request.expiration_time)

        resolutions: list[Resolution] = []
        for index, batch in enumerate(batches):
            resolutions.extend(await self._send_batch(index, batch, payload, options))
        return resolutions

    async def _send_batch(
        self,
        index: int,
        batch: Batch,
        payload: GatewayPayload,
        options: GatewayOptions,
    ) -> list[Resolution]:
        size = len(batch)
        self._debug("push.sending", batch=index, devices=size)
        try:
            response = await self._gateway.send(list(batch.tokens), payload, options)
        except Exception as exc:
            error = exc.to_dict() if isinstance(exc, BaseError) else repr(exc)
            self._logger.error("push.send_failed", batch=index, devices=size, error=error)
            raise
        if self._settings.verbose:
            self._logger.debug("push.gateway_response", batch=index, response=GatewayResponse.coerce(response).to_dict())
        return reduce_response(response, batch.tokens, batch.installations)

    def _debug(self, event: str, **kw: Any) -> None:
        if self._settings.verbose:
            self._logger.debug(event, **kw)
