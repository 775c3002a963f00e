"""Config settings – PushAdapterSettings."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, ClassVar, cast

from mp_push.config.settings.base import Settings
from mp_push.config.validation import InvalidSettingValueError, MissingRequiredSettingError

DEFAULT_MAX_TOKENS_PER_REQUEST = 1000


@dataclasses.dataclass
class PushAdapterSettings(Settings):
    """Static configuration of a push adapter.

    ``service_account_key`` is the gateway credential: a path to a service
    account JSON file, the JSON document itself, or an already parsed
    mapping.  ``database_url`` identifies the Firebase project endpoint.
    Both are required.
    """

    _prefix: ClassVar[str] = "PUSH"
    # camelCase keys accepted from host-application push configs
    _aliases: ClassVar[Mapping[str, str]] = {
        "maxTokensPerRequest": "max_tokens_per_request",
        "serviceAccountKey": "service_account_key",
        "databaseURL": "database_url",
        "databaseUrl": "database_url",
        "appName": "app_name",
    }

    service_account_key: str | Mapping[str, Any] | None = None
    database_url: str | None = None
    max_tokens_per_request: int = DEFAULT_MAX_TOKENS_PER_REQUEST
    app_name: str = "[DEFAULT]"
    verbose: bool = False

    def _validate(self) -> None:
        if not self.service_account_key:
            raise MissingRequiredSettingError("service_account_key", env_key=self.env_key("service_account_key"))
        if not self.database_url:
            raise MissingRequiredSettingError("database_url", env_key=self.env_key("database_url"))
        size = self.max_tokens_per_request
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidSettingValueError(
                "max_tokens_per_request", size, "must be a positive integer"
            )

    def credential_source(self) -> str | dict[str, Any]:
        """Return the credential in the form ``credentials.Certificate`` accepts.

        Inline JSON documents are parsed; paths and mappings pass through.
        """
        key = self.service_account_key
        if isinstance(key, Mapping):
            return dict(key)
        key = cast(str, key)
        if key.lstrip().startswith("{"):
            try:
                return json.loads(key)
            except json.JSONDecodeError as exc:
                raise InvalidSettingValueError(
                    "service_account_key", key, f"invalid JSON: {exc.msg}", secret=True
                ) from exc
        return key


__all__ = ["DEFAULT_MAX_TOKENS_PER_REQUEST", "PushAdapterSettings"]
