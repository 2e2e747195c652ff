from datetime import datetime, timezone
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from orchestra_cms.application.content.registry import get_content_type_or_404
from orchestra_cms.application.content.service import fetch_content, save_content
from orchestra_cms.errors import ContentValidationError
from orchestra_cms.utils.decorators import content_roles_required
from orchestra_cms.utils.request_context import current_request_id
from . import v1_bp


def _content_response(content_type):
    document = fetch_content(content_type)
    response = jsonify({
        "content": document,
        "requestId": current_request_id(),
    })
    response.headers["ETag"] = f'"{document.get("version", 0)}"'
    return response


# ------------------------
# Public
# ------------------------

@v1_bp.route("/content/<content_type>", methods=["GET"])
def get_content(content_type):
    return _content_response(get_content_type_or_404(content_type)), 200


# ------------------------
# Editors
# ------------------------

@v1_bp.route("/admin/content/<content_type>", methods=["GET"])
@jwt_required()
@content_roles_required
def get_admin_content(content_type):
    return _content_response(get_content_type_or_404(content_type)), 200


@v1_bp.route("/admin/content/<content_type>", methods=["PUT"])
@jwt_required()
@content_roles_required
def update_content(content_type):
    ct = get_content_type_or_404(content_type)

    payload = request.get_json(silent=True)
    if payload is None:
        raise ContentValidationError("Invalid JSON in request body")

    result = save_content(ct, payload, actor_id=g.current_user.id)

    return jsonify({
        "success": True,
        "message": f"{ct.label} content updated successfully",
        **result,
        "requestId": current_request_id(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }), 200
