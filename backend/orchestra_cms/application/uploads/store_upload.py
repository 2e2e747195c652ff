import time
import uuid

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from orchestra_cms.errors import ContentStoreError, UploadRejected
from orchestra_cms.extensions import db
from orchestra_cms.models.upload import Upload
from orchestra_cms.storage import StorageError, get_storage
from orchestra_cms.utils.audit import log_action
from orchestra_cms.utils.media import delete_storage_object
from orchestra_cms.utils.request_context import log_prefix
from orchestra_cms.utils.transaction import transactional

EXTENSIONS = {"image/jpeg": "jpg", "image/png": "png", "image/gif": "gif"}


def store_upload(file, *, user) -> Upload:
    """
    Store one file from the editor image picker and record its metadata.

    Responsibilities:
    - Accept only the configured image types and sizes
    - Name the object per user, never from the client's file name
    - Remove the stored object again if its metadata row cannot be written
    """
    prefix = log_prefix()

    if file is None or not file.filename:
        raise UploadRejected("No file provided")

    content_type = file.mimetype
    if content_type not in current_app.config["UPLOAD_ALLOWED_TYPES"]:
        raise UploadRejected("Invalid file type. Please upload JPEG, PNG, or GIF")

    max_bytes = current_app.config["UPLOAD_MAX_BYTES"]
    data = file.stream.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise UploadRejected(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB")

    bucket = current_app.config["UPLOAD_BUCKET"]
    extension = EXTENSIONS.get(content_type, content_type.rsplit("/", 1)[-1])
    path = f"{user.id}/{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}.{extension}"

    storage = get_storage()
    try:
        storage.upload(bucket, path, data, content_type=content_type, upsert=False)
    except StorageError as e:
        current_app.logger.error(f"{prefix}Upload to {bucket}/{path} failed: {e}")
        raise ContentStoreError("Failed to upload file", details=str(e)) from e

    public_url = storage.get_public_url(bucket, path)

    try:
        with transactional():
            upload = Upload(
                user_id=user.id,
                bucket=bucket,
                file_name=path,
                file_type=content_type,
                file_size=len(data),
                public_url=public_url,
                original_name=file.filename,
            )
            db.session.add(upload)
            db.session.flush()

            log_action(
                action="upload.create",
                entity_type="upload",
                entity_id=upload.id,
                payload={"file_name": path, "file_size": len(data)},
            )
    except SQLAlchemyError as e:
        current_app.logger.error(f"{prefix}Failed to save metadata for {bucket}/{path}: {e}")
        delete_storage_object(bucket, public_url)
        raise ContentStoreError("Failed to save file metadata", details=str(e)) from e

    current_app.logger.info(f"{prefix}Stored upload {bucket}/{path} ({len(data)} bytes)")
    return upload
