"""
reCAPTCHA error hierarchy and FastAPI exception handlers.

AppError is the base for all typed errors. The global exception handler
converts AppError subclasses to consistent JSON responses.

Precondition errors (missing keys, missing IP) are raised before any network
call. TransportError wraps whatever the HTTP layer raised and keeps it as
``__cause__``.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppError(Exception):
    """Base application error. All typed errors inherit from this."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(AppError):
    status_code = 500
    error_code = "captcha_misconfigured"


class MissingSiteKeyError(ConfigurationError):
    error_code = "missing_site_key"

    def __init__(self, message: str = "Missing site key", **kwargs: Any) -> None:
        super().__init__(message, field="site_key", **kwargs)


class MissingSecretKeyError(ConfigurationError):
    error_code = "missing_secret_key"

    def __init__(self, message: str = "Missing secret key", **kwargs: Any) -> None:
        super().__init__(message, field="secret_key", **kwargs)


class MissingIpError(ConfigurationError):
    status_code = 400
    error_code = "missing_ip"

    def __init__(self, message: str = "Missing ip address", **kwargs: Any) -> None:
        super().__init__(message, field="remote_ip", **kwargs)


class InvalidInputError(AppError):
    status_code = 400
    error_code = "invalid_input"


class TransportError(AppError):
    status_code = 502
    error_code = "captcha_transport_error"


class CaptchaVerificationError(AppError):
    status_code = 400
    error_code = "captcha_failed"


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
