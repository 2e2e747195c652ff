from orchestra_cms.extensions import db
from .base import BaseModel
from .content_mixin import ContentRecordMixin

NO_CONCERT_TEXT = "No concert order is available at this time. Please check back later."

class Concert(BaseModel, ContentRecordMixin):
    __tablename__ = "concerts"

    concert_name = db.Column(db.String(255), nullable=False)
    poster_image_url = db.Column(db.String(1024), nullable=True)
    no_concert_text = db.Column(db.Text, default=NO_CONCERT_TEXT)

class OrchestraGroup(BaseModel):
    __tablename__ = "orchestra_groups"

    concert_id = db.Column(db.Integer, db.ForeignKey("concerts.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    order_number = db.Column(db.Integer, nullable=False, default=0)

class PerformanceSong(BaseModel):
    __tablename__ = "performance_songs"

    group_id = db.Column(db.Integer, db.ForeignKey("orchestra_groups.id", ondelete="CASCADE"), nullable=False, index=True)
    song_title = db.Column(db.String(255), nullable=False)
    order_number = db.Column(db.Integer, nullable=False, default=0)
