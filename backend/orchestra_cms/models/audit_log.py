from orchestra_cms.extensions import db
from .base import BaseModel
from sqlalchemy import event


class AuditLog(BaseModel):
    """Append-only record of content saves and account changes."""
    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_cursor", "created_at", "id"),
        db.Index("ix_audit_entity", "entity_type", "entity_id"),
    )

    # Kept when the account is deleted; the entry then has no actor
    actor_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)

    # Content type name or "user"
    entity_type = db.Column(db.String(50), nullable=False)
    entity_id = db.Column(db.String(64), nullable=False)

    # Ties the entry to the server log lines of the same request
    request_id = db.Column(db.String(36), nullable=True)

    payload = db.Column(db.JSON, nullable=False, default=dict)


@event.listens_for(AuditLog, 'before_update')
@event.listens_for(AuditLog, 'before_delete')
def prevent_audit_mutation(mapper, connection, target):
    raise RuntimeError("Audit logs are immutable")
