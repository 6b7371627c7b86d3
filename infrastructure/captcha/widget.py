"""reCAPTCHA v2 widget markup.

The output is byte-for-byte stable across releases. Values are interpolated
verbatim, without HTML escaping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from errors import MissingSiteKeyError

if TYPE_CHECKING:
    from infrastructure.captcha.config import ReCaptchaConfig

# Rendered as data-<name> attributes, in this order
DATA_ATTRIBUTE_OPTIONS = (
    "theme",
    "type",
    "size",
    "tabindex",
    "callback",
    "expired-callback",
)

_SCRIPT_TAG = '<script type="text/javascript" src="{src}" async defer></script>'

_NOSCRIPT_TEMPLATE = """<noscript>
  <div style="width: 302px; height: 422px;">
    <div style="width: 302px; height: 422px; position: relative;">
      <div style="width: 302px; height: 422px; position: absolute;">
        <iframe src="{api_server}/fallback?k={site_key}"
                frameborder="0" scrolling="no"
                style="width: 302px; height:422px; border-style: none;">
        </iframe>
      </div>
      <div style="width: 300px; height: 60px; border-style: none;
                  bottom: 12px; left: 25px; margin: 0px; padding: 0px; right: 25px;
                  background: #f9f9f9; border: 1px solid #c1c1c1; border-radius: 3px;">
        <textarea id="g-recaptcha-response" name="g-recaptcha-response"
                  class="g-recaptcha-response"
                  style="width: 250px; height: 40px; border: 1px solid #c1c1c1;
                         margin: 10px 25px; padding: 0px; resize: none;" >
        </textarea>
      </div>
    </div>
  </div>
</noscript>"""


def is_empty(value: Any) -> bool:
    """Emptiness as the widget markup has always treated it.

    None, False, 0, "" and empty containers are empty, and so is the string
    "0" (a tabindex submitted from a form).
    """
    return not value or value == "0"


def render_widget(config: ReCaptchaConfig) -> str:
    """Return the script tag and widget div for ``config``.

    Raises:
        MissingSiteKeyError: no site key is configured.
    """
    site_key = config.get_site_key()
    if site_key is None:
        raise MissingSiteKeyError()

    api_server = config.api_server
    options = config.get_options()

    # Explicit rendering: the page's onload callback draws the widget itself
    onload = options.get("onload")
    if not is_empty(onload):
        return _SCRIPT_TAG.format(
            src=f"{api_server}.js?onload={onload}&render=explicit"
        )

    lang = options.get("hl")
    lang_query = "" if is_empty(lang) else f"?hl={lang}"

    data = f'data-sitekey="{site_key}"'
    for name in DATA_ATTRIBUTE_OPTIONS:
        value = options.get(name)
        if not is_empty(value):
            data += f' data-{name}="{value}"'

    markup = (
        _SCRIPT_TAG.format(src=f"{api_server}.js{lang_query}")
        + "\n"
        + f'<div class="g-recaptcha" {data}></div>'
    )

    if not is_empty(config.get_param("noscript")):
        markup += _NOSCRIPT_TEMPLATE.format(api_server=api_server, site_key=site_key)

    return markup
