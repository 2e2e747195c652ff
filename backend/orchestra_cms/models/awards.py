from orchestra_cms.extensions import db
from .base import BaseModel
from .content_mixin import ContentRecordMixin

class AwardsContent(BaseModel, ContentRecordMixin):
    __tablename__ = "awards_content"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")

class AwardsAchievement(BaseModel):
    __tablename__ = "awards_achievements"

    content_id = db.Column(db.Integer, db.ForeignKey("awards_content.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    image_src = db.Column(db.String(1024), default="")
    image_alt = db.Column(db.String(255), default="")
    order_number = db.Column(db.Integer, nullable=False, default=1)
