"""
Transport-agnostic description of the siteverify request.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

FORM_URLENCODED = "application/x-www-form-urlencoded"


class VerifyRequest(BaseModel):
    """Everything a transport needs to issue the siteverify POST."""

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    url: str
    content_type: str = FORM_URLENCODED
    # secret, remoteip, response
    fields: dict[str, Any]

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}
