from __future__ import annotations

from typing import List, Optional

from pydantic import model_validator

from orchestra_cms.models.homepage import DEFAULT_SECTION_COLOR
from .common import ChildItem, ContentDocument, NonEmptyStr, assert_unique_ids


class EventCard(ChildItem):
    title: str
    description: str
    link_text: str
    link_url: str


class StaffMember(ChildItem):
    name: str
    position: str
    image_url: str
    bio: str


class LeadershipMember(ChildItem):
    name: str
    image_url: str


class LeadershipSection(ChildItem):
    name: str
    color: str = DEFAULT_SECTION_COLOR
    members: List[LeadershipMember]

    @model_validator(mode="after")
    def _unique_members(self) -> "LeadershipSection":
        assert_unique_ids(self.members, "members")
        return self


class HomepageDocument(ContentDocument):
    hero_image_url: Optional[str] = None
    hero_title: NonEmptyStr
    hero_subtitle: str
    about_title: str
    about_description: str
    featured_events_title: str
    stats_students: str
    stats_performances: str
    stats_years: str
    staff_leadership_title: str
    event_cards: List[EventCard]
    staff_members: List[StaffMember]
    leadership_sections: List[LeadershipSection]

    @model_validator(mode="after")
    def _unique_children(self) -> "HomepageDocument":
        assert_unique_ids(self.event_cards, "event_cards")
        assert_unique_ids(self.staff_members, "staff_members")
        assert_unique_ids(self.leadership_sections, "leadership_sections")
        return self
