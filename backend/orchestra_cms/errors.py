import uuid
from datetime import datetime, timezone
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from orchestra_cms.domain.invariants.exceptions import InvariantViolation
from orchestra_cms.utils.request_context import current_request_id, log_prefix


class ContentError(Exception):
    status_code = 500

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ContentValidationError(ContentError):
    """Incoming document failed validation. Raised before any side effect."""
    status_code = 400


class VersionConflict(ContentError):
    status_code = 409


class ContentStoreError(ContentError):
    """A write to the relational store failed; the save was rolled back."""
    status_code = 500


class UploadRejected(ContentError):
    """Uploaded file is missing, of a disallowed type, or too large."""
    status_code = 400


def error_response(error: str, status: int, **extra):
    body = {
        "error": error,
        "requestId": current_request_id(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    body.update({k: v for k, v in extra.items() if v is not None})
    response = jsonify(body)
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return error_response("InvariantViolation", 400, message=str(error))

    @app.errorhandler(ContentValidationError)
    def handle_validation_error(error):
        return error_response(error.message, error.status_code, details=error.details)

    @app.errorhandler(VersionConflict)
    def handle_version_conflict(error):
        return error_response(error.message, error.status_code, details=error.details)

    @app.errorhandler(ContentStoreError)
    def handle_store_error(error):
        # Store details stay in the server log unless debugging
        details = error.details if current_app.debug else None
        return error_response(error.message, error.status_code, details=details)

    @app.errorhandler(UploadRejected)
    def handle_upload_rejected(error):
        return error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        error_id = uuid.uuid4().hex[:8]
        current_app.logger.exception(f"{log_prefix()}[ERROR {error_id}] Unexpected error: {error}")
        details = str(error) if current_app.debug else None
        return error_response("An unexpected error occurred", 500, errorId=error_id, details=details)


def register_jwt_handlers(jwt):
    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response("Unauthorized", 401, message=reason)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response("Unauthorized", 401, message=reason)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response("Unauthorized", 401, message="Token has expired")
