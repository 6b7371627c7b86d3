"""Builds the siteverify request from a ReCaptchaConfig."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from errors import MissingIpError, MissingSecretKeyError
from schemas.dto.requests.siteverify import VerifyRequest

if TYPE_CHECKING:
    from infrastructure.captcha.config import ReCaptchaConfig


def build_verify_request(config: ReCaptchaConfig, token: Any) -> VerifyRequest:
    """Describe the POST that checks ``token``.

    The token is passed through as-is; Google is the authority on its
    validity.

    Raises:
        MissingSecretKeyError: no secret key is configured.
        MissingIpError: no client IP is configured.
    """
    secret_key = config.get_secret_key()
    if secret_key is None:
        raise MissingSecretKeyError()

    remote_ip = config.get_ip()
    if remote_ip is None:
        raise MissingIpError()

    return VerifyRequest(
        url=config.verify_url,
        fields={
            "secret": secret_key,
            "remoteip": remote_ip,
            "response": token,
        },
    )
