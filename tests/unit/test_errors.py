"""Unit tests for the AppError hierarchy and its FastAPI handler."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from errors import (
    AppError,
    CaptchaVerificationError,
    ConfigurationError,
    InvalidInputError,
    MissingIpError,
    MissingSecretKeyError,
    MissingSiteKeyError,
    TransportError,
    register_error_handlers,
)


class TestAppErrorSubclasses:
    @pytest.mark.parametrize(
        "cls, status_code, error_code",
        [
            (ConfigurationError, 500, "captcha_misconfigured"),
            (InvalidInputError, 400, "invalid_input"),
            (TransportError, 502, "captcha_transport_error"),
            (CaptchaVerificationError, 400, "captcha_failed"),
        ],
        ids=["configuration", "invalid_input", "transport", "verification"],
    )
    def test_codes(self, cls, status_code, error_code):
        e = cls("boom")
        assert isinstance(e, AppError)
        assert e.status_code == status_code
        assert e.error_code == error_code
        assert e.message == "boom"

    @pytest.mark.parametrize(
        "cls, message, field, status_code",
        [
            (MissingSiteKeyError, "Missing site key", "site_key", 500),
            (MissingSecretKeyError, "Missing secret key", "secret_key", 500),
            (MissingIpError, "Missing ip address", "remote_ip", 400),
        ],
        ids=["site_key", "secret_key", "ip"],
    )
    def test_missing_value_defaults(self, cls, message, field, status_code):
        e = cls()
        assert isinstance(e, ConfigurationError)
        assert str(e) == message
        assert e.field == field
        assert e.status_code == status_code


class TestAppErrorToDict:
    def test_basic(self):
        e = TransportError("upstream down")
        assert e.to_dict() == {"error": "upstream down", "code": "captcha_transport_error"}

    def test_field_present(self):
        assert MissingIpError().to_dict()["field"] == "remote_ip"

    def test_details_present(self):
        e = CaptchaVerificationError("failed", details=["invalid-input-response"])
        assert e.to_dict()["details"] == ["invalid-input-response"]

    def test_no_optional_keys_when_absent(self):
        d = InvalidInputError("bad").to_dict()
        assert "field" not in d
        assert "details" not in d


class TestErrorHandler:
    def test_app_error_becomes_json(self):
        app = FastAPI()
        register_error_handlers(app)

        @app.post("/verify")
        async def verify():
            raise MissingIpError()

        resp = TestClient(app).post("/verify")
        assert resp.status_code == 400
        assert resp.json() == {
            "error": "Missing ip address",
            "code": "missing_ip",
            "field": "remote_ip",
        }
