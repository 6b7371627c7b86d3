"""Unit tests for reCAPTCHA widget markup."""

import pytest

from errors import MissingSiteKeyError
from infrastructure.captcha.config import ReCaptchaConfig
from infrastructure.captcha.widget import is_empty, render_widget

API = "https://www.google.com/recaptcha/api"
SCRIPT = f'<script type="text/javascript" src="{API}.js" async defer></script>'


def _config(**options) -> ReCaptchaConfig:
    return ReCaptchaConfig(site_key="site-key", options=options or None)


# ── Default markup ────────────────────────────────────────────────────────────


class TestDefaultMarkup:
    def test_exact_output(self):
        assert render_widget(_config()) == (
            SCRIPT
            + "\n"
            + '<div class="g-recaptcha" data-sitekey="site-key" data-theme="light"'
            ' data-type="image" data-size="normal"></div>'
        )

    def test_default_tabindex_zero_is_omitted(self):
        assert "data-tabindex" not in render_widget(_config())

    def test_no_language_suffix(self):
        assert f'src="{API}.js"' in render_widget(_config())

    def test_render_method_matches_function(self):
        config = _config()
        assert config.render() == render_widget(config)

    def test_idempotent(self):
        config = _config(hl="de", callback="done")
        assert config.render() == config.render()


# ── Options ───────────────────────────────────────────────────────────────────


class TestOptions:
    def test_onload_emits_only_explicit_script(self):
        html = render_widget(_config(onload="cb"))
        assert html == (
            f'<script type="text/javascript" src="{API}.js?onload=cb&render=explicit"'
            " async defer></script>"
        )
        assert "<div" not in html

    def test_onload_ignores_noscript(self):
        config = _config(onload="cb").set_param("noscript", True)
        assert "<noscript>" not in config.render()

    def test_hl_suffix(self):
        html = render_widget(_config(hl="fr"))
        assert f'src="{API}.js?hl=fr"' in html

    @pytest.mark.parametrize("hl", ["", None], ids=["empty", "none"])
    def test_empty_hl_has_no_suffix(self, hl):
        assert "?hl=" not in render_widget(_config(hl=hl))

    def test_all_data_attributes_in_order(self):
        html = render_widget(
            _config(
                theme="dark",
                type="audio",
                size="compact",
                tabindex=3,
                callback="onDone",
                **{"expired-callback": "onExpired"},
            )
        )
        assert (
            '<div class="g-recaptcha" data-sitekey="site-key" data-theme="dark"'
            ' data-type="audio" data-size="compact" data-tabindex="3"'
            ' data-callback="onDone" data-expired-callback="onExpired"></div>'
        ) in html

    @pytest.mark.parametrize(
        "option, value",
        [("theme", ""), ("theme", None), ("size", ""), ("tabindex", "0")],
        ids=["empty_theme", "none_theme", "empty_size", "string_zero_tabindex"],
    )
    def test_empty_values_are_omitted(self, option, value):
        html = render_widget(_config(**{option: value}))
        assert f"data-{option}=" not in html

    def test_unknown_option_not_rendered(self):
        html = render_widget(_config(badge="inline"))
        assert "badge" not in html

    def test_values_are_not_escaped(self):
        html = render_widget(_config(callback="a&b"))
        assert 'data-callback="a&b"' in html

    def test_theme_is_not_validated(self):
        assert 'data-theme="neon"' in render_widget(_config(theme="neon"))

    def test_non_string_values_pass_through(self):
        html = render_widget(_config(theme=5, tabindex=1.5, hl=7))
        assert f'src="{API}.js?hl=7"' in html
        assert 'data-theme="5"' in html
        assert 'data-tabindex="1.5"' in html

    @pytest.mark.parametrize(
        "option", ["size", "callback"], ids=["size", "callback"]
    )
    def test_false_value_is_omitted(self, option):
        assert f"data-{option}=" not in render_widget(_config(**{option: False}))

    def test_custom_api_server(self):
        config = ReCaptchaConfig(
            site_key="k", api_server="https://www.recaptcha.net/recaptcha/api"
        )
        assert 'src="https://www.recaptcha.net/recaptcha/api.js"' in config.render()


# ── Noscript fallback ─────────────────────────────────────────────────────────


class TestNoscript:
    def test_fallback_appended(self):
        config = _config().set_param("noscript", True)
        html = config.render()
        assert "</div><noscript>\n" in html
        assert f'<iframe src="{API}/fallback?k=site-key"' in html
        assert '<textarea id="g-recaptcha-response" name="g-recaptcha-response"' in html
        assert html.endswith("</noscript>")

    def test_fixed_styling(self):
        html = _config().set_param("noscript", True).render()
        assert '<div style="width: 302px; height: 422px;">' in html
        assert '<div style="width: 300px; height: 60px; border-style: none;' in html
        assert "background: #f9f9f9; border: 1px solid #c1c1c1; border-radius: 3px;" in html

    def test_absent_by_default(self):
        assert "<noscript>" not in _config().render()

    @pytest.mark.parametrize(
        "value", ["false", "yes", 1], ids=["false_str", "yes_str", "one"]
    )
    def test_non_empty_value_appends_fallback(self, value):
        assert "<noscript>" in _config().set_param("noscript", value).render()

    @pytest.mark.parametrize(
        "value", [None, "", "0", 0], ids=["none", "empty", "zero_str", "zero"]
    )
    def test_empty_value_skips_fallback(self, value):
        assert "<noscript>" not in _config().set_param("noscript", value).render()


# ── Errors ────────────────────────────────────────────────────────────────────


class TestMissingSiteKey:
    def test_raises(self):
        with pytest.raises(MissingSiteKeyError, match="Missing site key"):
            render_widget(ReCaptchaConfig())

    def test_empty_string_site_key_still_renders(self):
        assert 'data-sitekey=""' in ReCaptchaConfig(site_key="").render()


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        (False, True),
        (0, True),
        ("", True),
        ("0", True),
        ([], True),
        ("light", False),
        (1, False),
        ("00", False),
    ],
)
def test_is_empty(value, expected):
    assert is_empty(value) is expected
