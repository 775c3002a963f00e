"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_push.kernel.errors import (
    ApplicationError,
    BaseError,
    ExternalServiceError,
    GatewayTransportError,
    InfrastructureError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        err = BaseError("boom", detail={"k": 1})
        data = json.loads(str(err))
        assert data == {"error": "BaseError", "code": "base_error", "message": "boom", "detail": {"k": 1}}

    def test_empty_detail_is_omitted(self) -> None:
        assert "detail" not in BaseError("m").to_dict()

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        BaseError("m", detail=detail).detail["k"] = 2
        assert detail == {"k": 1}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "RuntimeError: root"

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    def test_application_error(self) -> None:
        err = ApplicationError("bad usage")
        assert isinstance(err, BaseError)
        assert err.code == "application_error"

    def test_external_service_error_default_message(self) -> None:
        err = ExternalServiceError("fcm")
        assert isinstance(err, InfrastructureError)
        assert err.message == "External service 'fcm' error"
        assert err.service == "fcm"
        assert err.status_code is None


class TestGatewayTransportError:
    def test_is_external_service_error(self) -> None:
        err = GatewayTransportError("fcm", "unavailable")
        assert isinstance(err, ExternalServiceError)
        assert err.code == "gateway_transport_error"

    def test_batch_size_in_detail(self) -> None:
        err = GatewayTransportError("fcm", "unavailable", batch_size=42)
        assert err.batch_size == 42
        assert err.to_dict()["detail"] == {"batch_size": 42}

    def test_can_be_caught_as_infrastructure_error(self) -> None:
        with pytest.raises(InfrastructureError):
            raise GatewayTransportError("fcm")
