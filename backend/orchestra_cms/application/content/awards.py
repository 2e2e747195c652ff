from orchestra_cms.domain.identity import persisted_id
from orchestra_cms.models.awards import AwardsAchievement, AwardsContent
from orchestra_cms.normalizers.awards import normalize_achievement, normalize_awards
from orchestra_cms.schemas.awards import AwardsDocument
from .base import ContentType
from .images import ImageTarget
from .sync import ordered_children, replace_children

BUCKET = "achievement-images"
ACHIEVEMENT_IMAGES = ImageTarget("awards/", "achievement-")


def default_document():
    return {
        "title": "Awards",
        "description": "No description available.",
        "achievements": [],
    }


def _achievements(content):
    return ordered_children(AwardsAchievement, parent_column="content_id", parent_id=content.id)


def assemble(content):
    return normalize_awards(content, _achievements(content))


def resolve_images(document, content, tracker):
    previous = {}
    if content is not None:
        for row in _achievements(content):
            previous[row.id] = row.image_src
            tracker.remember(row.image_src)

    for achievement in document.achievements:
        achievement.imageSrc = tracker.resolve(
            achievement.imageSrc,
            target=ACHIEVEMENT_IMAGES,
            fallback=previous.get(persisted_id(achievement.id)),
        )


def apply_fields(content, document):
    content.title = document.title
    content.description = document.description


def write_children(content, document):
    rows = replace_children(
        AwardsAchievement,
        parent_column="content_id",
        parent_id=content.id,
        items=document.achievements,
        to_row=lambda a: {"title": a.title, "image_src": a.imageSrc, "image_alt": a.imageAlt},
        order_base=1,
        image_fields=("image_src",),
    )
    return {"achievements": [normalize_achievement(row) for row in rows]}


AWARDS = ContentType(
    name="awards",
    label="Awards",
    model=AwardsContent,
    schema=AwardsDocument,
    default_document=default_document,
    assemble=assemble,
    apply_fields=apply_fields,
    write_children=write_children,
    resolve_images=resolve_images,
    bucket=BUCKET,
    image_targets=(ACHIEVEMENT_IMAGES,),
)
