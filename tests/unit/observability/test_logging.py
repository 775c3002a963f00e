"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from mp_push.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_credential(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"service_account_key": {"private_key": "x"}, "devices": 3})
        assert result["service_account_key"] == SensitiveFieldsFilter.REDACTED
        assert result["devices"] == 3

    def test_case_insensitive(self) -> None:
        result = SensitiveFieldsFilter().redact({"serviceAccountKey": "x"})
        assert result["serviceAccountKey"] == SensitiveFieldsFilter.REDACTED

    def test_redact_deep(self) -> None:
        data = {"config": {"private_key": "pem", "database_url": "https://x"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["config"]["private_key"] == SensitiveFieldsFilter.REDACTED
        assert result["config"]["database_url"] == "https://x"

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"device_token"}))
        assert f.redact({"device_token": "t", "private_key": "k"}) == {
            "device_token": SensitiveFieldsFilter.REDACTED,
            "private_key": "k",
        }

    def test_defaults_cover_private_key(self) -> None:
        assert "private_key" in DEFAULT_SENSITIVE_FIELDS


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_returns_logger_with_methods(self) -> None:
        logger = get_logger("mp_push.test")
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(logger, method))

    def test_binds_initial_values(self) -> None:
        logger = get_logger("mp_push.test", adapter="firebase-push-adapter")
        assert callable(logger.info)


class TestJsonLoggerFactory:
    def test_emits_json_with_redaction(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("mp_push.test").info("push.configured", private_key="pem", devices=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "push.configured"
        assert record["private_key"] == SensitiveFieldsFilter.REDACTED
        assert record["devices"] == 2
        assert record["level"] == "info"

    def test_sets_root_level(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
