"""
Template-side helpers for the reCAPTCHA widget.

ReCaptchaConfig.render() raises on misconfiguration. Templates usually prefer
an empty slot over a 500, so this module offers the forgiving variant: it
returns "" and reports the problem through ``warnings`` and the log instead.
"""

from __future__ import annotations

import warnings

from jinja2 import Environment
from markupsafe import Markup

from errors import AppError
from infrastructure.captcha.config import ReCaptchaConfig
from shared.logging import get_logger

log = get_logger(__name__)

TEMPLATE_GLOBAL_NAME = "recaptcha_widget"


def render_widget_or_empty(config: ReCaptchaConfig) -> str:
    """Render the widget, or return ``""`` and emit a RuntimeWarning on failure."""
    try:
        return config.render()
    except AppError as e:
        log.warning("recaptcha_render_failed", error=e.message, code=e.error_code)
        warnings.warn(e.message, RuntimeWarning, stacklevel=2)
        return ""


def recaptcha_widget(config: ReCaptchaConfig) -> Markup:
    """Jinja2 global: ``{{ recaptcha_widget(captcha) }}``.

    The markup is trusted output of the renderer, so it is marked safe for
    autoescaping environments.
    """
    return Markup(render_widget_or_empty(config))


def register_template_globals(env: Environment) -> Environment:
    """Expose ``recaptcha_widget`` to every template rendered by ``env``."""
    env.globals[TEMPLATE_GLOBAL_NAME] = recaptcha_widget
    return env
