from orchestra_cms.extensions import db
from .base import BaseModel
from .content_mixin import ContentRecordMixin

DEFAULT_SECTION_COLOR = "#3b82f6"

class HomepageContent(BaseModel, ContentRecordMixin):
    __tablename__ = "homepage_content"

    hero_image_url = db.Column(db.String(1024), nullable=True)
    hero_title = db.Column(db.String(255), nullable=False)
    hero_subtitle = db.Column(db.Text, default="")
    about_title = db.Column(db.String(255), default="")
    about_description = db.Column(db.Text, default="")
    featured_events_title = db.Column(db.String(255), default="")
    stats_students = db.Column(db.String(50), default="")
    stats_performances = db.Column(db.String(50), default="")
    stats_years = db.Column(db.String(50), default="")
    staff_leadership_title = db.Column(db.String(255), default="")

class HomepageEventCard(BaseModel):
    __tablename__ = "homepage_event_cards"

    content_id = db.Column(db.Integer, db.ForeignKey("homepage_content.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")
    link_text = db.Column(db.String(255), default="")
    link_url = db.Column(db.String(1024), default="")
    order_number = db.Column(db.Integer, nullable=False, default=0)

class StaffMember(BaseModel):
    __tablename__ = "staff_members"

    content_id = db.Column(db.Integer, db.ForeignKey("homepage_content.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    position = db.Column(db.String(255), default="")
    image_url = db.Column(db.String(1024), default="")
    bio = db.Column(db.Text, default="")
    order_number = db.Column(db.Integer, nullable=False, default=0)

class LeadershipSection(BaseModel):
    __tablename__ = "leadership_sections"

    content_id = db.Column(db.Integer, db.ForeignKey("homepage_content.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    color = db.Column(db.String(32), default=DEFAULT_SECTION_COLOR)
    order_number = db.Column(db.Integer, nullable=False, default=0)

class LeadershipMember(BaseModel):
    __tablename__ = "leadership_members"

    section_id = db.Column(db.Integer, db.ForeignKey("leadership_sections.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    image_url = db.Column(db.String(1024), default="")
    order_number = db.Column(db.Integer, nullable=False, default=0)
