"""Protocols the reCAPTCHA provider depends on, not the concrete implementations."""

from typing import Any, Protocol

import httpx

from schemas.models.recaptcha import VerificationOutcome


class CaptchaTransport(Protocol):
    async def post(self, url: str, **kwargs: Any) -> httpx.Response: ...


class CaptchaProvider(Protocol):
    async def verify(self, token: str) -> VerificationOutcome: ...
