import base64
import binascii
import re
import uuid
from typing import Optional, Tuple
from urllib.parse import unquote, urlparse
from flask import current_app
from orchestra_cms.storage import StorageError, get_storage
from .request_context import log_prefix

INLINE_IMAGE_PREFIX = "data:image"
DATA_URL_IMAGE_RE = re.compile(r"^data:image/([a-zA-Z0-9.+-]+);base64,(.+)$", re.DOTALL)

# Subtypes whose natural file extension differs from the mime subtype
EXTENSION_OVERRIDES = {"svg+xml": "svg", "x-icon": "ico", "vnd.microsoft.icon": "ico"}


def is_inline_image(value) -> bool:
    return isinstance(value, str) and value.startswith(INLINE_IMAGE_PREFIX)


def decode_inline_image(payload: str) -> Tuple[str, bytes]:
    """
    Split a ``data:image/<subtype>;base64,<body>`` string into its mime
    subtype and decoded bytes.

    Raises ValueError on anything that is not a well-formed inline image.
    """
    if not is_inline_image(payload):
        raise ValueError("Not an inline image payload")

    match = DATA_URL_IMAGE_RE.match(payload)
    if not match:
        raise ValueError("Invalid base64 image format")

    subtype = match.group(1).lower()
    body = re.sub(r"\s+", "", match.group(2))
    try:
        data = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Image payload could not be decoded") from exc

    if not data:
        raise ValueError("Image payload is empty")

    max_bytes = current_app.config.get("MAX_IMAGE_BYTES")
    if max_bytes and len(data) > max_bytes:
        raise ValueError(f"Image exceeds {max_bytes} bytes")

    return subtype, data


def upload_base64_image(
    bucket: str,
    payload: str,
    path_prefix: str = "",
    name_prefix: str = "",
) -> Optional[str]:
    """
    Upload an inline image and return its public URL.

    The object name is random and never derived from user content. Returns
    None (and logs) when the payload is malformed or the store rejects the
    upload; callers keep the previous image in that case.
    """
    prefix = log_prefix()

    try:
        subtype, data = decode_inline_image(payload)
    except ValueError as e:
        current_app.logger.error(f"{prefix}Invalid inline image for bucket {bucket}: {e}")
        return None

    extension = EXTENSION_OVERRIDES.get(subtype, subtype)
    path = f"{path_prefix}{name_prefix}{uuid.uuid4().hex}.{extension}"

    storage = get_storage()
    current_app.logger.info(f"{prefix}Uploading image to {bucket}/{path}")
    try:
        storage.upload(bucket, path, data, content_type=f"image/{subtype}", upsert=True)
    except StorageError as e:
        current_app.logger.error(f"{prefix}Failed to upload image to {bucket}/{path}: {e}")
        return None

    return storage.get_public_url(bucket, path)


def storage_path_from_url(bucket: str, public_url: str) -> Optional[str]:
    """Path of an object relative to its bucket, or None if the URL is not in it."""
    try:
        parsed = urlparse(public_url)
    except ValueError:
        return None

    segments = parsed.path.split("/")
    if bucket not in segments:
        return None

    index = segments.index(bucket)
    path = "/".join(segments[index + 1:])
    return unquote(path) or None


def delete_storage_object(bucket: str, public_url: Optional[str]) -> bool:
    """
    Delete the object behind a public URL.

    URLs outside the bucket are skipped and count as success, as does an
    object that is already gone. Never raises; returns False only when the
    store refused the removal or the URL could not be mapped to a path.
    """
    prefix = log_prefix()

    if not public_url or f"/{bucket}/" not in public_url:
        current_app.logger.debug(f"{prefix}Skipping deletion for non-storage URL: {public_url}")
        return True

    path = storage_path_from_url(bucket, public_url)
    if not path:
        current_app.logger.error(f"{prefix}Could not extract storage path from URL: {public_url}")
        return False

    try:
        get_storage().remove(bucket, [path])
    except StorageError as e:
        current_app.logger.warning(f"{prefix}Failed to delete {bucket}/{path}: {e}")
        return False

    current_app.logger.info(f"{prefix}Deleted {bucket}/{path}")
    return True
