from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import model_validator

from .common import ChildItem, ContentDocument, assert_unique_ids


class GalleryImage(ChildItem):
    src: str
    # Accepted for compatibility, always re-derived from list position
    order_number: Optional[int] = None


class FeatureItem(ChildItem):
    icon: Literal["MusicNote", "MapPin", "Users"]
    title: str
    description: str
    order_number: Optional[int] = None


class TripsDocument(ContentDocument):
    page_title: str
    page_subtitle: str
    quote: str
    gallery_images: List[GalleryImage]
    feature_items: List[FeatureItem]

    @model_validator(mode="after")
    def _unique_children(self) -> "TripsDocument":
        assert_unique_ids(self.gallery_images, "gallery_images")
        assert_unique_ids(self.feature_items, "feature_items")
        return self
