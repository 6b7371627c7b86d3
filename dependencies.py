"""
FastAPI dependency providers.

All injectable dependencies are defined here as plain functions used with
FastAPI's Depends() system. The host application is expected to put an
AppSettings instance on ``app.state.settings`` and a shared HttpClient on
``app.state.http_client`` during startup.
"""

from __future__ import annotations

from fastapi import Request

from config import AppSettings
from infrastructure.captcha.config import ReCaptchaConfig
from infrastructure.captcha.recaptcha import ReCaptchaProvider
from infrastructure.http_client import HttpClient
from shared.ip_utils import get_client_ip


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_http_client(request: Request) -> HttpClient:
    """Return the shared HttpClient stored on app.state."""
    return request.app.state.http_client


def get_recaptcha_config(request: Request) -> ReCaptchaConfig:
    """Build a fresh per-request config with the caller's IP filled in."""
    settings = get_settings(request)
    return ReCaptchaConfig.from_settings(
        settings.recaptcha, remote_ip=get_client_ip(request)
    )


def get_recaptcha_provider(request: Request) -> ReCaptchaProvider:
    """Return a provider bound to this request's config and the shared client."""
    return ReCaptchaProvider(get_recaptcha_config(request), get_http_client(request))
