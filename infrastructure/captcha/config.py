"""Per-request reCAPTCHA configuration.

Holds the keys, the client IP and the widget params/options that both the
renderer and the siteverify request builder read. Instances are cheap and
meant to be built once per request; they are not safe to mutate from several
tasks at once.

The client IP is never looked up implicitly. Hosts resolve it (see
shared.ip_utils.get_client_ip) and pass it in.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from config import DEFAULT_API_SERVER, DEFAULT_VERIFY_URL, ReCaptchaSettings
from errors import InvalidInputError
from infrastructure.captcha.widget import render_widget
from schemas.models.recaptcha import WidgetOptions, WidgetParams


def _as_dict(values: Any, method: str) -> dict:
    if isinstance(values, Mapping):
        return dict(values)
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidInputError(
            f"{method} expects a mapping or an iterable of (key, value) pairs; "
            f'received "{type(values).__name__}"'
        )
    pairs = list(values)
    # dict() would unpack a two-character string as a (key, value) pair
    if any(isinstance(pair, (str, bytes)) for pair in pairs):
        raise InvalidInputError(
            f"{method} expects (key, value) pairs; received a string item"
        )
    try:
        return dict(pairs)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"{method} expects an iterable of (key, value) pairs: {e}"
        ) from e


class ReCaptchaConfig:
    def __init__(
        self,
        site_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        params: Optional[Any] = None,
        options: Optional[Any] = None,
        remote_ip: Optional[str] = None,
        *,
        api_server: str = DEFAULT_API_SERVER,
        verify_url: str = DEFAULT_VERIFY_URL,
    ) -> None:
        self._site_key = site_key
        self._secret_key = secret_key
        self._remote_ip = remote_ip
        self._params = WidgetParams()
        self._options = WidgetOptions()
        self.api_server = api_server
        self.verify_url = verify_url

        if params is not None:
            self.set_params(params)
        if options is not None:
            self.set_options(options)

    @classmethod
    def from_settings(
        cls, settings: ReCaptchaSettings, remote_ip: Optional[str] = None
    ) -> "ReCaptchaConfig":
        """Build a config from environment settings; empty keys count as unset."""
        return cls(
            site_key=settings.recaptcha_site_key or None,
            secret_key=settings.recaptcha_secret_key or None,
            params={"noscript": settings.recaptcha_noscript},
            options=settings.widget_options(),
            remote_ip=remote_ip,
            api_server=settings.recaptcha_api_server,
            verify_url=settings.recaptcha_verify_url,
        )

    # ── Keys and IP ──────────────────────────────────────────────────────────

    def set_site_key(self, site_key: Optional[str]) -> "ReCaptchaConfig":
        self._site_key = site_key
        return self

    def get_site_key(self) -> Optional[str]:
        return self._site_key

    def set_secret_key(self, secret_key: Optional[str]) -> "ReCaptchaConfig":
        self._secret_key = secret_key
        return self

    def get_secret_key(self) -> Optional[str]:
        return self._secret_key

    def set_ip(self, ip: Optional[str]) -> "ReCaptchaConfig":
        self._remote_ip = ip
        return self

    def get_ip(self) -> Optional[str]:
        return self._remote_ip

    # ── Params ───────────────────────────────────────────────────────────────

    def set_param(self, key: str, value: Any) -> "ReCaptchaConfig":
        self._params = self._params.merged({key: value})
        return self

    def set_params(self, params: Any) -> "ReCaptchaConfig":
        self._params = self._params.merged(_as_dict(params, "set_params"))
        return self

    def get_param(self, key: str) -> Any:
        return self._params.lookup(key)

    def get_params(self) -> dict[str, Any]:
        return self._params.to_external()

    @property
    def params(self) -> WidgetParams:
        return self._params

    # ── Options ──────────────────────────────────────────────────────────────

    def set_option(self, key: str, value: Any) -> "ReCaptchaConfig":
        self._options = self._options.merged({key: value})
        return self

    def set_options(self, options: Any) -> "ReCaptchaConfig":
        self._options = self._options.merged(_as_dict(options, "set_options"))
        return self

    def get_option(self, key: str) -> Any:
        return self._options.lookup(key)

    def get_options(self) -> dict[str, Any]:
        return self._options.to_external()

    @property
    def options(self) -> WidgetOptions:
        return self._options

    # ── Rendering ────────────────────────────────────────────────────────────

    def render(self) -> str:
        """Return the widget markup; raises MissingSiteKeyError without a site key."""
        return render_widget(self)

    def __repr__(self) -> str:
        return (
            f"ReCaptchaConfig(site_key={self._site_key!r}, "
            f"remote_ip={self._remote_ip!r}, secret_key="
            f"{'***' if self._secret_key else None!r})"
        )
