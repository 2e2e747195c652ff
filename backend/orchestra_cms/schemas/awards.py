from __future__ import annotations

from typing import List, Optional

from pydantic import model_validator

from .common import ChildItem, ContentDocument, assert_unique_ids


class Achievement(ChildItem):
    title: str
    imageSrc: str
    imageAlt: str
    order_number: Optional[int] = None


class AwardsDocument(ContentDocument):
    title: str
    description: str
    achievements: List[Achievement]

    @model_validator(mode="after")
    def _unique_achievements(self) -> "AwardsDocument":
        assert_unique_ids(self.achievements, "achievements")
        return self
