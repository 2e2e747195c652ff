from __future__ import annotations

from typing import List, Optional

from pydantic import model_validator

from .common import ChildItem, ContentDocument, NonEmptyStr, assert_unique_ids


class CompetitionItem(ChildItem):
    clientId: Optional[str] = None
    name: NonEmptyStr
    description: str
    image: Optional[str] = None
    categories: List[str]
    additionalInfo: Optional[str] = None


class CompetitionsDocument(ContentDocument):
    title: NonEmptyStr
    description: str
    competitions: List[CompetitionItem]

    @model_validator(mode="after")
    def _unique_competitions(self) -> "CompetitionsDocument":
        assert_unique_ids(self.competitions, "competitions")
        return self
