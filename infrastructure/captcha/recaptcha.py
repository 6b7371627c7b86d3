"""reCAPTCHA v2 implementation of CaptchaProvider.

One verify() call is exactly one POST to siteverify: no retries, no caching.
The timeout is enforced by the injected HttpClient.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from errors import TransportError
from infrastructure.captcha.config import ReCaptchaConfig
from infrastructure.captcha.protocol import CaptchaTransport
from infrastructure.captcha.siteverify import build_verify_request
from schemas.dto.responses.siteverify import SiteVerifyResponse
from schemas.models.recaptcha import VerificationOutcome
from shared.logging import get_logger, hash_ip

log = get_logger(__name__)


class ReCaptchaProvider:
    def __init__(self, config: ReCaptchaConfig, http_client: CaptchaTransport) -> None:
        self._config = config
        self._http = http_client

    @property
    def config(self) -> ReCaptchaConfig:
        return self._config

    async def verify(self, token: str) -> VerificationOutcome:
        """Submit ``token`` to siteverify and return Google's verdict.

        Raises:
            MissingSecretKeyError, MissingIpError: before any request is sent.
            TransportError: the request failed or returned a non-2xx status.
        """
        request = build_verify_request(self._config, token)

        try:
            response = await self._http.post(
                request.url,
                data=request.fields,
                headers=request.headers,
            )
        except (httpx.HTTPError, OSError) as e:
            log.error(
                "recaptcha_transport_error",
                error=str(e),
                error_type=type(e).__name__,
                ip_hash=hash_ip(self._config.get_ip()),
            )
            raise TransportError(
                "reCAPTCHA verification request failed",
                details={"error_type": type(e).__name__},
            ) from e

        if not 200 <= response.status_code < 300:
            log.error(
                "recaptcha_api_error",
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            raise TransportError(
                f"reCAPTCHA verification returned HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        outcome = self._parse(response)
        if not outcome.success:
            log.warning(
                "recaptcha_verification_failed",
                error_codes=outcome.error_codes,
                ip_hash=hash_ip(self._config.get_ip()),
            )
        return outcome

    @staticmethod
    def _parse(response: httpx.Response) -> VerificationOutcome:
        # A body that is not a JSON object with "success" counts as a failure
        try:
            payload = SiteVerifyResponse.model_validate_json(response.content)
        except ValidationError as e:
            log.warning(
                "recaptcha_invalid_payload",
                error_count=e.error_count(),
                response_text=response.text[:200],
            )
            return VerificationOutcome(success=False, error_codes=[])
        return payload.to_outcome()
