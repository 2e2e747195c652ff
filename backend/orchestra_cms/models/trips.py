from orchestra_cms.extensions import db
from .base import BaseModel
from .content_mixin import ContentRecordMixin

FEATURE_ICONS = ("MusicNote", "MapPin", "Users")

class TripsContent(BaseModel, ContentRecordMixin):
    __tablename__ = "trips_content"

    page_title = db.Column(db.String(255), nullable=False)
    page_subtitle = db.Column(db.String(255), default="")
    quote = db.Column(db.Text, default="")

class TripsGalleryImage(BaseModel):
    __tablename__ = "trips_gallery_images"

    content_id = db.Column(db.Integer, db.ForeignKey("trips_content.id", ondelete="CASCADE"), nullable=False, index=True)
    src = db.Column(db.String(1024), nullable=False, default="")
    order_number = db.Column(db.Integer, nullable=False, default=1)

class TripsFeatureItem(BaseModel):
    __tablename__ = "trips_feature_items"

    content_id = db.Column(db.Integer, db.ForeignKey("trips_content.id", ondelete="CASCADE"), nullable=False, index=True)
    icon = db.Column(db.Enum(*FEATURE_ICONS, name="trips_feature_icon"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")
    order_number = db.Column(db.Integer, nullable=False, default=1)
