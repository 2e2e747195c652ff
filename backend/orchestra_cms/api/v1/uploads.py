from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from orchestra_cms.application.uploads.store_upload import store_upload
from orchestra_cms.models.user import ROLES
from orchestra_cms.utils.decorators import roles_required
from orchestra_cms.utils.request_context import current_request_id
from . import v1_bp


@v1_bp.route("/uploads", methods=["POST"])
@jwt_required()
@roles_required(*ROLES)
def upload_file():
    """Multipart upload of a single image in the ``file`` field."""
    upload = store_upload(request.files.get("file"), user=g.current_user)

    return jsonify({
        "success": True,
        "id": upload.id,
        "url": upload.public_url,
        "fileName": upload.file_name,
        "requestId": current_request_id(),
    }), 201
