from orchestra_cms.domain.identity import persisted_id
from orchestra_cms.models.homepage import (
    HomepageContent,
    HomepageEventCard,
    LeadershipMember,
    LeadershipSection,
    StaffMember,
)
from orchestra_cms.normalizers.homepage import (
    normalize_event_card,
    normalize_homepage,
    normalize_leadership_section,
    normalize_staff_member,
)
from orchestra_cms.schemas.homepage import HomepageDocument
from .base import ContentType
from .images import ImageTarget
from .sync import ordered_children, replace_children, sync_grouped_children

BUCKET = "homepage-images"
HERO_IMAGES = ImageTarget("hero_images/", "hero_image_")
STAFF_IMAGES = ImageTarget("staff_images/", "staff_")
LEADERSHIP_IMAGES = ImageTarget("leadership_images/", "leadership_")


def default_document():
    return {
        "hero_image_url": "",
        "hero_title": "Cypress Ranch Orchestra",
        "hero_subtitle": "Inspiring musical excellence since 2008",
        "about_title": "About Our Orchestra",
        "about_description": (
            "The Cypress Ranch High School Orchestra program is dedicated to fostering musical "
            "excellence, personal growth, and community engagement through exceptional orchestral education."
        ),
        "featured_events_title": "Upcoming Events",
        "stats_students": "250",
        "stats_performances": "20",
        "stats_years": "15",
        "staff_leadership_title": "Our Staff & Student Leadership",
        "event_cards": [],
        "staff_members": [],
        "leadership_sections": [],
    }


def _children(model, content):
    return ordered_children(model, parent_column="content_id", parent_id=content.id)


def _sections(content):
    # One extra query per section for its members
    return [
        (section, ordered_children(LeadershipMember, parent_column="section_id", parent_id=section.id))
        for section in _children(LeadershipSection, content)
    ]


def assemble(content):
    return normalize_homepage(
        content,
        _children(HomepageEventCard, content),
        _children(StaffMember, content),
        _sections(content),
    )


def resolve_images(document, content, tracker):
    previous_staff = {}
    previous_members = {}
    previous_hero = None

    if content is not None:
        previous_hero = content.hero_image_url
        tracker.remember(previous_hero)
        for row in _children(StaffMember, content):
            previous_staff[row.id] = row.image_url
            tracker.remember(row.image_url)
        for _, members in _sections(content):
            for row in members:
                previous_members[row.id] = row.image_url
                tracker.remember(row.image_url)

    document.hero_image_url = tracker.resolve(
        document.hero_image_url,
        target=HERO_IMAGES,
        fallback=previous_hero,
    )

    for member in document.staff_members:
        member.image_url = tracker.resolve(
            member.image_url,
            target=STAFF_IMAGES,
            fallback=previous_staff.get(persisted_id(member.id)),
        )

    for section in document.leadership_sections:
        for member in section.members:
            member.image_url = tracker.resolve(
                member.image_url,
                target=LEADERSHIP_IMAGES,
                fallback=previous_members.get(persisted_id(member.id)),
            )


def apply_fields(content, document):
    for field in (
        "hero_image_url",
        "hero_title",
        "hero_subtitle",
        "about_title",
        "about_description",
        "featured_events_title",
        "stats_students",
        "stats_performances",
        "stats_years",
        "staff_leadership_title",
    ):
        setattr(content, field, getattr(document, field))


def write_children(content, document):
    event_cards = replace_children(
        HomepageEventCard,
        parent_column="content_id",
        parent_id=content.id,
        items=document.event_cards,
        to_row=lambda card: {
            "title": card.title,
            "description": card.description,
            "link_text": card.link_text,
            "link_url": card.link_url,
        },
    )
    staff = replace_children(
        StaffMember,
        parent_column="content_id",
        parent_id=content.id,
        items=document.staff_members,
        to_row=lambda member: {
            "name": member.name,
            "position": member.position,
            "image_url": member.image_url,
            "bio": member.bio,
        },
        image_fields=("image_url",),
    )
    sections = sync_grouped_children(
        LeadershipSection,
        LeadershipMember,
        parent_column="content_id",
        parent_id=content.id,
        groups=document.leadership_sections,
        to_group_row=lambda section: {"name": section.name, "color": section.color},
        children_of=lambda section: section.members,
        child_parent_column="section_id",
        to_child_row=lambda member: {"name": member.name, "image_url": member.image_url},
        child_image_fields=("image_url",),
    )
    return {
        "event_cards": [normalize_event_card(row) for row in event_cards],
        "staff_members": [normalize_staff_member(row) for row in staff],
        "leadership_sections": [
            normalize_leadership_section(section, members) for section, members in sections
        ],
    }


HOMEPAGE = ContentType(
    name="homepage",
    label="Homepage",
    model=HomepageContent,
    schema=HomepageDocument,
    default_document=default_document,
    assemble=assemble,
    apply_fields=apply_fields,
    write_children=write_children,
    resolve_images=resolve_images,
    bucket=BUCKET,
    image_targets=(HERO_IMAGES, STAFF_IMAGES, LEADERSHIP_IMAGES),
    image_fields=("hero_image_url",),
)
