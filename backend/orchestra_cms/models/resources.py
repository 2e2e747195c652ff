from orchestra_cms.extensions import db
from .base import BaseModel
from .content_mixin import ContentRecordMixin

class ResourcesContent(BaseModel, ContentRecordMixin):
    __tablename__ = "resources_content"

    calendar_url = db.Column(db.String(2048), nullable=True)
    support_title = db.Column(db.String(255), nullable=True)
    youtube_url = db.Column(db.String(2048), nullable=True)
