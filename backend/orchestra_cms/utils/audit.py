from typing import Any, Dict, Optional
from flask import g
from orchestra_cms.extensions import db
from orchestra_cms.models.audit_log import AuditLog
from .request_context import current_request_id

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[Any],
    payload: Optional[Dict[str, Any]] = None
):
    """Stage an audit entry in the current transaction; the caller commits."""
    user = g.get("current_user")
    if user is None:
        return  # Only authenticated editors are audited

    db.session.add(AuditLog(
        actor_id=user.id,
        action=action,
        entity_type=entity_type,
        entity_id=str(entity_id) if entity_id is not None else "*",
        request_id=current_request_id(),
        payload=payload or {},
    ))
