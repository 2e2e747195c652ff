from typing import Dict, Optional
from flask import abort
from .awards import AWARDS
from .base import ContentType
from .competitions import COMPETITIONS
from .concerts import CONCERTS
from .homepage import HOMEPAGE
from .resources import RESOURCES
from .trips import TRIPS

CONTENT_TYPES: Dict[str, ContentType] = {
    ct.name: ct
    for ct in (HOMEPAGE, CONCERTS, COMPETITIONS, TRIPS, AWARDS, RESOURCES)
}


def get_content_type(name: str) -> Optional[ContentType]:
    return CONTENT_TYPES.get(name)


def get_content_type_or_404(name: str) -> ContentType:
    content_type = get_content_type(name)
    if content_type is None:
        abort(404, description=f"Unknown content type: {name}")
    return content_type
