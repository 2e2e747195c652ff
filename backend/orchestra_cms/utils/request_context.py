from flask import g, has_request_context

def current_request_id():
    if has_request_context():
        return g.get("request_id")
    return None

def log_prefix() -> str:
    """Prefix for log lines so one save can be followed across the log."""
    request_id = current_request_id()
    return f"[{request_id}] " if request_id else ""
