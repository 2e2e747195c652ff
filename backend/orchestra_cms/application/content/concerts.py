from orchestra_cms.models.concerts import NO_CONCERT_TEXT, Concert, OrchestraGroup, PerformanceSong
from orchestra_cms.normalizers.concerts import normalize_concert, normalize_orchestra
from orchestra_cms.schemas.concerts import ConcertsDocument
from .base import ContentType
from .images import ImageTarget
from .sync import ordered_children, sync_grouped_children

BUCKET = "concert-images"
POSTER_IMAGES = ImageTarget("concert_images/", "concert_poster_")


def default_document():
    return {
        "concert_name": "Fall",
        "poster_image_url": "",
        "no_concert_text": NO_CONCERT_TEXT,
        "orchestras": [],
    }


def assemble(concert):
    groups = ordered_children(OrchestraGroup, parent_column="concert_id", parent_id=concert.id)
    orchestras = [
        (group, ordered_children(PerformanceSong, parent_column="group_id", parent_id=group.id))
        for group in groups
    ]
    return normalize_concert(concert, orchestras)


def resolve_images(document, concert, tracker):
    previous = concert.poster_image_url if concert is not None else None
    tracker.remember(previous)
    document.poster_image_url = tracker.resolve(
        document.poster_image_url,
        target=POSTER_IMAGES,
        fallback=previous,
    )


def apply_fields(concert, document):
    concert.concert_name = document.concert_name
    concert.poster_image_url = document.poster_image_url
    concert.no_concert_text = document.no_concert_text


def write_children(concert, document):
    orchestras = sync_grouped_children(
        OrchestraGroup,
        PerformanceSong,
        parent_column="concert_id",
        parent_id=concert.id,
        groups=document.orchestras,
        to_group_row=lambda orchestra: {"name": orchestra.name},
        children_of=lambda orchestra: orchestra.songs,
        child_parent_column="group_id",
        to_child_row=lambda title: {"song_title": title},
    )
    return {"orchestras": [normalize_orchestra(group, songs) for group, songs in orchestras]}


CONCERTS = ContentType(
    name="concerts",
    label="Concert",
    model=Concert,
    schema=ConcertsDocument,
    default_document=default_document,
    assemble=assemble,
    apply_fields=apply_fields,
    write_children=write_children,
    resolve_images=resolve_images,
    bucket=BUCKET,
    image_targets=(POSTER_IMAGES,),
    image_fields=("poster_image_url",),
)
