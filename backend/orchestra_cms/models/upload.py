from orchestra_cms.extensions import db
from .base import BaseModel


class Upload(BaseModel):
    """Metadata of a file stored through the upload endpoint."""
    __tablename__ = "uploads"

    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    bucket = db.Column(db.String(100), nullable=False)
    # Path inside the bucket, "<user id>/<ms timestamp>-<random>.<ext>"
    file_name = db.Column(db.String(255), nullable=False, unique=True)
    file_type = db.Column(db.String(50), nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    public_url = db.Column(db.String(1024), nullable=False)
    original_name = db.Column(db.String(255), nullable=False, default="")
