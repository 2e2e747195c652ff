from orchestra_cms.extensions import db
from .base import BaseModel
from .content_mixin import ContentRecordMixin

class CompetitionsPage(BaseModel, ContentRecordMixin):
    __tablename__ = "competitions_page"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")

class Competition(BaseModel):
    __tablename__ = "competitions"

    page_id = db.Column(db.Integer, db.ForeignKey("competitions_page.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")
    image_url = db.Column(db.String(1024), nullable=True)
    additional_info = db.Column(db.Text, nullable=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)

class CompetitionCategory(BaseModel):
    __tablename__ = "competition_categories"

    competition_id = db.Column(db.Integer, db.ForeignKey("competitions.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)
