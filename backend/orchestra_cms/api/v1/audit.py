from flask import request, jsonify
from flask_jwt_extended import jwt_required
from werkzeug.exceptions import BadRequest
from orchestra_cms.models.audit_log import AuditLog
from orchestra_cms.models.user import User
from orchestra_cms.normalizers.audit import normalize_audit_log
from orchestra_cms.normalizers.pagination import normalize_pagination
from orchestra_cms.utils.decorators import roles_required
from orchestra_cms.utils.pagination import apply_cursor, paginate_cursor
from . import v1_bp

@v1_bp.route("/admin/audit", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_audit_logs():
    try:
        limit = min(int(request.args.get("limit", 20)), 100)
    except ValueError:
        raise BadRequest("limit must be an integer")

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    query = apply_cursor(query, model=AuditLog, cursor=request.args.get("cursor"))
    logs, cursor = paginate_cursor(query, model=AuditLog, limit=limit)

    actor_ids = {log.actor_id for log in logs if log.actor_id is not None}
    actor_emails = {
        user.id: user.email
        for user in User.query.filter(User.id.in_(actor_ids)).all()
    } if actor_ids else {}

    return jsonify(normalize_pagination(
        logs,
        lambda log: normalize_audit_log(log, actor_emails),
        cursor=cursor,
    )), 200
