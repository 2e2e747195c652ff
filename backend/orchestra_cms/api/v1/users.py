from flask import current_app, g, request, jsonify
from flask_jwt_extended import jwt_required
from orchestra_cms.extensions import db
from orchestra_cms.models.user import User
from orchestra_cms.normalizers.user import normalize_user
from orchestra_cms.schemas.common import parse_document
from orchestra_cms.schemas.users import CreateUser, UpdateUserRole
from orchestra_cms.utils.audit import log_action
from orchestra_cms.utils.decorators import roles_required
from orchestra_cms.utils.request_context import log_prefix
from orchestra_cms.utils.transaction import transactional
from . import v1_bp


@v1_bp.route("/admin/users", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_users():
    users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    return jsonify({"users": [normalize_user(user) for user in users]}), 200


@v1_bp.route("/admin/users", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_user():
    data = parse_document(CreateUser, request.get_json(silent=True))

    if User.query.filter_by(email=data.email).first():
        return jsonify({"error": "A user with this email already exists"}), 409

    with transactional():
        user = User()
        user.email = data.email
        user.full_name = data.fullName
        user.role = data.role
        user.set_password(data.password)

        db.session.add(user)
        db.session.flush()

        log_action(
            action="user.create",
            entity_type="user",
            entity_id=user.id,
            payload={"email": user.email, "role": user.role},
        )

    return jsonify({
        "message": "User created successfully",
        "user": normalize_user(user),
    }), 201


@v1_bp.route("/admin/users/<int:user_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_user_role(user_id):
    data = parse_document(UpdateUserRole, request.get_json(silent=True))

    if user_id == g.current_user.id:
        return jsonify({"error": "You cannot change your own role"}), 403

    user = db.session.get(User, user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404

    previous_role = user.role

    with transactional():
        user.role = data.role
        log_action(
            action="user.role_change",
            entity_type="user",
            entity_id=user.id,
            payload={"from": previous_role, "to": data.role},
        )

    return jsonify({
        "message": "User role updated successfully",
        "user": normalize_user(user),
    }), 200


@v1_bp.route("/admin/users/<int:user_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_user(user_id):
    user = db.session.get(User, user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404

    if user.id == g.current_user.id:
        return jsonify({"error": "Cannot delete your own account"}), 403

    email = user.email

    # Audit entries outlive the account; they keep the email in their payload
    with transactional():
        log_action(
            action="user.delete",
            entity_type="user",
            entity_id=user.id,
            payload={"email": email, "role": user.role},
        )
        db.session.delete(user)

    current_app.logger.info(f"{log_prefix()}User {email} (ID: {user_id}) deleted by {g.current_user.email}")
    return jsonify({"message": "User deleted successfully"}), 200
