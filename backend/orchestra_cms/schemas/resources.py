from __future__ import annotations

from typing import Optional

from pydantic import field_validator

from .common import ContentDocument, NonEmptyStr, validate_optional_url


class ResourcesDocument(ContentDocument):
    calendar_url: Optional[str] = None
    support_title: Optional[NonEmptyStr] = None
    youtube_url: Optional[str] = None

    @field_validator("calendar_url", "youtube_url")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_optional_url(value)
