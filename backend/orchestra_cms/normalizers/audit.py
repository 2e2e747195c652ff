from typing import Any, Dict, Optional


def normalize_audit_log(log, actor_emails: Optional[Dict[int, str]] = None) -> Dict[str, Any]:
    """
    API shape of one audit entry.

    ``actor_emails`` maps user ids to emails for the page being rendered;
    entries whose actor was not resolved carry ``actor_email: None``.
    """
    return {
        "id": log.id,
        "actor_id": log.actor_id,
        "actor_email": (actor_emails or {}).get(log.actor_id),
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "request_id": log.request_id,
        "payload": log.payload or {},
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
