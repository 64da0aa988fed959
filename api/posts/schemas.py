"""
Pydantic schemas for the post endpoints.

Wire keys are camelCase (`imageUrl`, `userId`, `createdAt`) because the
front end consumes them as-is.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# posts.user_id is a Postgres INTEGER.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int4(text: str) -> int | None:
    """
    Parse a plain ASCII decimal integer that fits a Postgres INTEGER.

    Returns None for anything else, including the extra forms `int()` accepts
    (`1_0`, non-ASCII digits).
    """
    text = (text or "").strip()
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not INT4_MIN <= value <= INT4_MAX:
        return None
    return value


class CreatePostRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    # Optional here so that a missing value gets the same 400 as a blank one.
    content: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    user_id: int | None = Field(default=None, alias="userId")

    @field_validator("image_url", mode="before")
    @classmethod
    def _lenient_image_url(cls, value: Any) -> str | None:
        if not value or not isinstance(value, str):
            return None
        return value

    @field_validator("user_id", mode="before")
    @classmethod
    def _lenient_user_id(cls, value: Any) -> int | None:
        # Malformed author references are dropped, never rejected.
        if not value or isinstance(value, bool):
            return None
        if isinstance(value, float):
            # JSON does not distinguish 7 from 7.0.
            if not value.is_integer():
                return None
            value = int(value)
        if isinstance(value, int):
            user_id = value if INT4_MIN <= value <= INT4_MAX else None
        elif isinstance(value, str):
            user_id = parse_int4(value)
        else:
            return None
        return user_id or None


class PostResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    content: str
    image_url: str | None = Field(default=None, alias="imageUrl")
    user_id: int | None = Field(default=None, alias="userId")
    created_at: datetime = Field(alias="createdAt")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
