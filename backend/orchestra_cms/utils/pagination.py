"""
Keyset pagination over (created_at, id), newest first.

Cursors are opaque to clients: a urlsafe base64 of ``<iso timestamp>|<id>``
pointing at the last row of the previous page.
"""
import base64
from datetime import datetime
from typing import Any, List, Optional, Tuple, TypedDict

from sqlalchemy import and_, or_
from werkzeug.exceptions import BadRequest


class CursorMeta(TypedDict):
    has_more: bool
    next_cursor: Optional[str]


def encode_cursor(created_at: datetime, row_id: int) -> str:
    raw = f"{created_at.isoformat()}|{row_id}"
    return base64.urlsafe_b64encode(raw.encode()).decode()


def decode_cursor(cursor: str) -> Tuple[datetime, int]:
    try:
        raw = base64.urlsafe_b64decode(cursor.encode()).decode()
        ts_str, row_id = raw.split("|", 1)
        return datetime.fromisoformat(ts_str), int(row_id)
    except ValueError as exc:
        # binascii and unicode errors are ValueErrors too
        raise BadRequest("Invalid cursor format") from exc


def apply_cursor(query, *, model, cursor: Optional[str]):
    """Restrict ``query`` to rows strictly after ``cursor`` in newest-first order."""
    if not cursor:
        return query

    cursor_ts, cursor_id = decode_cursor(cursor)
    return query.filter(
        or_(
            model.created_at < cursor_ts,
            and_(model.created_at == cursor_ts, model.id < cursor_id),
        )
    )


def paginate_cursor(query, *, model, limit: int) -> Tuple[List[Any], CursorMeta]:
    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    # One extra row tells whether another page exists
    rows = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .limit(limit + 1)
        .all()
    )
    items = rows[:limit]
    has_more = len(rows) > limit

    next_cursor = encode_cursor(items[-1].created_at, items[-1].id) if has_more else None
    return items, {"has_more": has_more, "next_cursor": next_cursor}
