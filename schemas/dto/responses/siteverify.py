"""
Raw siteverify response payload.

Google answers with hyphenated keys ("error-codes"); the alias keeps the
Python attribute name readable.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.models.recaptcha import VerificationOutcome


class SiteVerifyResponse(BaseModel):
    """JSON body returned by POST /recaptcha/api/siteverify."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")
    hostname: Optional[str] = None
    challenge_ts: Optional[str] = None

    @field_validator("error_codes", mode="before")
    @classmethod
    def _wrap_single_code(cls, v: Any) -> Any:
        # A lone code may arrive as a bare string
        if isinstance(v, str):
            return [v]
        return v

    def to_outcome(self) -> VerificationOutcome:
        return VerificationOutcome(
            success=self.success,
            error_codes=list(self.error_codes),
            hostname=self.hostname,
            challenge_ts=self.challenge_ts,
        )
