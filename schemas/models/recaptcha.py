"""
Structured models for reCAPTCHA widget configuration and verification results.

WidgetOptions and WidgetParams name the keys the renderer understands and keep
everything else in the model's extra map, so display options Google adds later
can still be stored and read back.

Values are free-form and stored exactly as given: ``theme`` accepts any value,
not just "light"/"dark", and ``noscript`` keeps "false" as the string "false".
The renderer decides what counts as empty.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExtensibleModel(BaseModel):
    """Base for key/value bags with a known schema plus an extras map.

    Keys are always exchanged using their external (aliased) names, e.g.
    ``expired-callback`` rather than ``expired_callback``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @classmethod
    def external_key(cls, key: Any) -> str:
        key = str(key)
        field = cls.model_fields.get(key)
        if field is not None and field.alias:
            return field.alias
        return key

    def to_external(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def merged(self, updates: dict[Any, Any]) -> "ExtensibleModel":
        """Return a new instance with ``updates`` applied on top of this one."""
        data = self.to_external()
        for key, value in updates.items():
            data[self.external_key(key)] = value
        return type(self).model_validate(data)

    def lookup(self, key: Any) -> Any:
        """Return the value stored under an external or field name, or None."""
        return self.to_external().get(self.external_key(key))


class WidgetParams(ExtensibleModel):
    """Rendering parameters. ``noscript`` appends the no-JavaScript fallback."""

    noscript: Any = False


class WidgetOptions(ExtensibleModel):
    """Display options, see https://developers.google.com/recaptcha/docs/display#config"""

    theme: Any = "light"
    type: Any = "image"
    size: Any = "normal"
    tabindex: Any = 0
    callback: Any = None
    expired_callback: Any = Field(default=None, alias="expired-callback")
    hl: Any = None  # None lets the widget auto-detect the language
    onload: Any = None


class VerificationOutcome(BaseModel):
    """Result of one siteverify call.

    ``success`` and ``error_codes`` are surfaced exactly as the remote service
    reported them; nothing here interprets the codes.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = False
    error_codes: list[str] = Field(default_factory=list)
    hostname: Optional[str] = None
    challenge_ts: Optional[str] = None

    def is_valid(self) -> bool:
        return self.success
