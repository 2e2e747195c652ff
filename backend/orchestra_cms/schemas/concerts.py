from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from orchestra_cms.models.concerts import NO_CONCERT_TEXT
from .common import ChildItem, ContentDocument, TrimmedStr, assert_unique_ids


class Orchestra(ChildItem):
    name: TrimmedStr
    songs: List[TrimmedStr] = Field(..., min_length=1)


class ConcertsDocument(ContentDocument):
    concert_name: TrimmedStr
    poster_image_url: Optional[str] = None
    no_concert_text: Optional[str] = NO_CONCERT_TEXT
    orchestras: List[Orchestra] = Field(default_factory=list)

    @field_validator("no_concert_text", mode="after")
    @classmethod
    def _default_no_concert_text(cls, value: Optional[str]) -> Optional[str]:
        return NO_CONCERT_TEXT if value is None else value

    @model_validator(mode="after")
    def _unique_orchestras(self) -> "ConcertsDocument":
        assert_unique_ids(self.orchestras, "orchestras")
        return self
