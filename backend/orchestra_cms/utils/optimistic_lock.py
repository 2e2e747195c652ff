from flask import request, has_request_context
from datetime import timezone
from dateutil.parser import parse
from orchestra_cms.errors import ContentValidationError, VersionConflict


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _header(name):
    if not has_request_context():
        return None
    value = request.headers.get(name)
    return value.strip() if value else None


def enforce_optimistic_lock(entity, submitted_version=None):
    """
    Reject a save whose base version no longer matches the stored record.

    The base version may come from the document's ``version`` field, an
    ``If-Match`` header, or an ``If-Unmodified-Since`` header. Without any
    of them the check is skipped.
    """
    stored_version = entity.version if entity is not None else 0

    if_match = _header("If-Match")
    if if_match == "*":
        # Any stored version matches; there must be one
        if entity is None:
            raise VersionConflict(
                "Conflict detected. Content has not been saved yet.",
                details={"expected": "*", "current": stored_version},
            )
    elif if_match:
        try:
            header_version = int(if_match.strip('"').removeprefix("W/").strip('"'))
        except ValueError:
            raise ContentValidationError("Invalid If-Match header")
        if header_version != stored_version:
            raise VersionConflict(
                "Conflict detected. Content has been modified.",
                details={"expected": header_version, "current": stored_version},
            )

    if submitted_version is not None and submitted_version != stored_version:
        raise VersionConflict(
            "Conflict detected. Content has been modified.",
            details={"expected": submitted_version, "current": stored_version},
        )

    client_ts = _header("If-Unmodified-Since")
    if not client_ts or entity is None or entity.updated_at is None:
        return

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ValueError, OverflowError):
        raise ContentValidationError("Invalid If-Unmodified-Since header")

    # HTTP dates have second precision
    server_ts = normalize_ts(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        raise VersionConflict("Conflict detected. Content has been modified.")
