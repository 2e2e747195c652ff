from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity
from orchestra_cms.extensions import db
from orchestra_cms.models.user import User

def _load_current_user():
    """Resolve the token subject to an active user and attach it to ``g``."""
    identity = get_jwt_identity()
    try:
        user_id = int(identity)
    except (TypeError, ValueError):
        return None

    user = db.session.get(User, user_id)
    if not user or not user.is_active:
        return None

    g.current_user = user
    return user

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            user = _load_current_user()
            if user is None:
                return jsonify({"error": "Unauthorized", "requestId": g.get("request_id")}), 401

            if user.role not in allowed_roles:
                return jsonify({"error": "Insufficient permissions", "requestId": g.get("request_id")}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def content_roles_required(fn):
    """Gate a content route on the allow-list of the content type in the URL."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        from orchestra_cms.application.content.registry import get_content_type_or_404

        content_type = get_content_type_or_404(kwargs["content_type"])
        return roles_required(*content_type.roles)(fn)(*args, **kwargs)
    return wrapper
