from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from orchestra_cms.models.user import EDITOR_ROLES
from orchestra_cms.schemas.common import ContentDocument
from .images import ImageTarget, ImageTracker


@dataclass(frozen=True)
class ContentType:
    """
    Everything the generic fetch/save path needs to know about one page.

    - ``default_document`` is served while no Parent Record exists
    - ``assemble`` turns a stored Parent Record into the public document
    - ``resolve_images`` uploads inline images before the transaction starts
    - ``apply_fields`` copies scalar fields onto the Parent Record
    - ``write_children`` replaces child collections and returns them normalized
    - ``image_fields`` are Parent Record columns that must hold durable URLs
    """
    name: str
    label: str
    model: Type
    schema: Type[ContentDocument]
    default_document: Callable[[], Dict[str, Any]]
    assemble: Callable[[Any], Dict[str, Any]]
    apply_fields: Callable[[Any, Any], None]
    write_children: Callable[[Any, Any], Dict[str, List[Dict[str, Any]]]]
    resolve_images: Optional[Callable[[Any, Any, ImageTracker], None]] = None
    bucket: Optional[str] = None
    image_targets: Tuple[ImageTarget, ...] = ()
    image_fields: Tuple[str, ...] = ()
    roles: Tuple[str, ...] = EDITOR_ROLES

    def tracker(self) -> ImageTracker:
        return ImageTracker(self.bucket, self.image_targets)


def no_children(record, document):
    return {}
