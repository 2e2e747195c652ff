from orchestra_cms.models.resources import ResourcesContent
from orchestra_cms.normalizers.resources import normalize_resources
from orchestra_cms.schemas.resources import ResourcesDocument
from .base import ContentType, no_children


def default_document():
    return {
        "calendar_url": (
            "https://calendar.google.com/calendar/embed"
            "?src=c_20p6293m4hda8ecdv1k63ki418%40group.calendar.google.com&amp"
        ),
        "support_title": "Just For Some Support :)",
        "youtube_url": "https://www.youtube.com/embed/QkklAQLhnQY?si=HGTk2aKkxV3r1ITb",
    }


def apply_fields(content, document):
    content.calendar_url = document.calendar_url
    content.support_title = document.support_title
    content.youtube_url = document.youtube_url


RESOURCES = ContentType(
    name="resources",
    label="Resources",
    model=ResourcesContent,
    schema=ResourcesDocument,
    default_document=default_document,
    assemble=normalize_resources,
    apply_fields=apply_fields,
    write_children=no_children,
)
