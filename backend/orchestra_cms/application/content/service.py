from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from orchestra_cms.domain.invariants.content import assert_durable_images
from orchestra_cms.errors import ContentStoreError
from orchestra_cms.extensions import db
from orchestra_cms.models.content_mixin import CONTENT_ID
from orchestra_cms.schemas.common import parse_document
from orchestra_cms.utils.audit import log_action
from orchestra_cms.utils.optimistic_lock import enforce_optimistic_lock
from orchestra_cms.utils.request_context import log_prefix
from orchestra_cms.utils.transaction import transactional
from .base import ContentType


def unwrap_payload(payload: Any) -> Any:
    """Editors may send the document itself or ``{"content": {...}}``."""
    if isinstance(payload, dict) and isinstance(payload.get("content"), dict):
        return payload["content"]
    return payload


def fetch_content(content_type: ContentType) -> Dict[str, Any]:
    """
    Assemble the current document, or the default document on first run.
    """
    record = db.session.get(content_type.model, CONTENT_ID)
    if record is None:
        return {**content_type.default_document(), "version": 0}
    return content_type.assemble(record)


def save_content(
    content_type: ContentType,
    payload: Any,
    *,
    actor_id: Optional[int],
) -> Dict[str, Any]:
    """
    Replace one content type with the submitted document.

    Responsibilities:
    - Validate before any side effect
    - Reject stale base versions
    - Upload inline images, keeping the previous image when an upload fails
    - Replace scalar fields and every child collection in one transaction
    - Audit logging
    - Best-effort removal of images the new document no longer references
    """
    prefix = log_prefix()
    document = parse_document(content_type.schema, unwrap_payload(payload))

    record = db.session.get(content_type.model, CONTENT_ID)
    enforce_optimistic_lock(record, submitted_version=document.version)

    tracker = content_type.tracker()
    if content_type.resolve_images:
        content_type.resolve_images(document, record, tracker)

    model = content_type.model
    try:
        with transactional():
            record = db.session.execute(
                select(model)
                .where(model.id == CONTENT_ID)
                .with_for_update()
                .execution_options(populate_existing=True)
            ).scalar_one_or_none()

            # Another save may have landed while images were uploading
            enforce_optimistic_lock(record, submitted_version=document.version)

            if record is None:
                record = model(id=CONTENT_ID)
                db.session.add(record)

            content_type.apply_fields(record, document)
            assert_durable_images(record, content_type.image_fields, label=model.__tablename__)
            db.session.flush()

            updated = content_type.write_children(record, document)
            record.bump_version(actor_id)
            db.session.flush()

            log_action(
                action="content.update",
                entity_type=content_type.name,
                entity_id=record.id,
                payload={
                    "version": record.version,
                    "collections": {name: len(rows) for name, rows in updated.items()},
                    "uploaded_images": len(tracker.uploaded_urls),
                    "failed_uploads": tracker.upload_failures,
                },
            )
    except SQLAlchemyError as e:
        tracker.discard_uploads()
        current_app.logger.error(f"{prefix}Failed to save {content_type.name} content: {e}")
        raise ContentStoreError(f"Failed to update {content_type.label.lower()} content", details=str(e)) from e
    except Exception:
        tracker.discard_uploads()
        raise

    image_cleanup = tracker.cleanup_orphans()
    current_app.logger.info(
        f"{prefix}Saved {content_type.name} content v{record.version} "
        f"({image_cleanup['deleted']} orphaned image(s) removed)"
    )

    return {
        "contentId": record.id,
        "version": record.version,
        "updated": updated,
        "image_cleanup": image_cleanup,
    }
