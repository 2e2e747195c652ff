from orchestra_cms.domain.identity import persisted_id
from orchestra_cms.models.competitions import Competition, CompetitionCategory, CompetitionsPage
from orchestra_cms.normalizers.competitions import normalize_competition, normalize_competitions_page
from orchestra_cms.schemas.competitions import CompetitionsDocument
from .base import ContentType
from .images import ImageTarget
from .sync import ordered_children, sync_grouped_children

BUCKET = "competition-images"
COMPETITION_IMAGES = ImageTarget("competition_images/", "competition_")
ORDER_FIELD = "display_order"


def default_document():
    return {
        "title": "Our Competitions",
        "description": (
            "Cypress Ranch Orchestra participates in various prestigious competitions, "
            "showcasing our students' talents and dedication to musical excellence."
        ),
        "competitions": [],
    }


def _competitions(page):
    return ordered_children(Competition, parent_column="page_id", parent_id=page.id, order_field=ORDER_FIELD)


def assemble(page):
    competitions = [
        (
            competition,
            ordered_children(
                CompetitionCategory,
                parent_column="competition_id",
                parent_id=competition.id,
                order_field=ORDER_FIELD,
            ),
        )
        for competition in _competitions(page)
    ]
    return normalize_competitions_page(page, competitions)


def resolve_images(document, page, tracker):
    previous = {}
    if page is not None:
        for row in _competitions(page):
            previous[row.id] = row.image_url
            tracker.remember(row.image_url)

    for competition in document.competitions:
        competition.image = tracker.resolve(
            competition.image,
            target=COMPETITION_IMAGES,
            fallback=previous.get(persisted_id(competition.id)),
        )


def apply_fields(page, document):
    page.title = document.title
    page.description = document.description


def _competition_row(item):
    return {
        "name": item.name,
        "description": item.description,
        "image_url": item.image or None,
        "additional_info": item.additionalInfo,
    }


def write_children(page, document):
    saved = sync_grouped_children(
        Competition,
        CompetitionCategory,
        parent_column="page_id",
        parent_id=page.id,
        groups=document.competitions,
        to_group_row=_competition_row,
        children_of=lambda item: [name for name in item.categories if name.strip()],
        child_parent_column="competition_id",
        to_child_row=lambda name: {"name": name.strip()},
        order_field=ORDER_FIELD,
        group_image_fields=("image_url",),
    )
    return {
        "competitions": [
            normalize_competition(competition, categories, client_id=item.clientId)
            for item, (competition, categories) in zip(document.competitions, saved)
        ]
    }


COMPETITIONS = ContentType(
    name="competitions",
    label="Competitions",
    model=CompetitionsPage,
    schema=CompetitionsDocument,
    default_document=default_document,
    assemble=assemble,
    apply_fields=apply_fields,
    write_children=write_children,
    resolve_images=resolve_images,
    bucket=BUCKET,
    image_targets=(COMPETITION_IMAGES,),
)
