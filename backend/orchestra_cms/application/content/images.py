from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set
from flask import current_app
from orchestra_cms.utils.media import (
    delete_storage_object,
    is_inline_image,
    storage_path_from_url,
    upload_base64_image,
)
from orchestra_cms.utils.request_context import log_prefix


@dataclass(frozen=True)
class ImageTarget:
    """Where uploads for one image field land inside the content bucket."""
    path_prefix: str
    name_prefix: str = ""


class ImageTracker:
    """
    Image bookkeeping for a single save.

    Collects the durable URLs referenced before the save, turns inline
    payloads into durable URLs, and afterwards deletes whatever the saved
    document no longer references.
    """

    def __init__(self, bucket: Optional[str], targets: Iterable[ImageTarget] = ()):
        self.bucket = bucket
        self.prefixes = tuple(t.path_prefix for t in targets)
        self.previous_urls: Set[str] = set()
        self.current_urls: Set[str] = set()
        self.uploaded_urls: List[str] = []
        self.upload_failures = 0

    def remember(self, *urls: Optional[str]) -> None:
        for url in urls:
            if url and not is_inline_image(url):
                self.previous_urls.add(url)

    def resolve(self, value: Optional[str], *, target: ImageTarget, fallback: Optional[str] = None) -> Optional[str]:
        """
        Return the value to persist for one image field.

        Inline payloads are uploaded; when the upload fails the previous
        durable value for the slot is kept, or the field is emptied.
        """
        if is_inline_image(value):
            url = upload_base64_image(self.bucket, value, target.path_prefix, target.name_prefix)
            if url:
                self.uploaded_urls.append(url)
                value = url
            else:
                self.upload_failures += 1
                current_app.logger.warning(
                    f"{log_prefix()}Keeping previous image for {target.path_prefix or 'field'} after failed upload"
                )
                value = fallback if fallback and not is_inline_image(fallback) else ""

        if value:
            self.current_urls.add(value)
        return value

    def is_managed(self, url: str) -> bool:
        if not self.bucket or not url:
            return False
        path = storage_path_from_url(self.bucket, url)
        if not path:
            return False
        return not self.prefixes or path.startswith(self.prefixes)

    def orphaned_urls(self) -> List[str]:
        return sorted(
            url for url in self.previous_urls - self.current_urls
            if self.is_managed(url)
        )

    def cleanup_orphans(self) -> Dict[str, object]:
        """Delete images the saved content no longer references. Never raises."""
        failed = []
        deleted = 0
        for url in self.orphaned_urls():
            if delete_storage_object(self.bucket, url):
                deleted += 1
            else:
                failed.append(url)

        if failed:
            current_app.logger.warning(f"{log_prefix()}{len(failed)} orphaned image(s) could not be deleted")
        return {"deleted": deleted, "failed": failed}

    def discard_uploads(self) -> None:
        """Remove images uploaded by a save that was rolled back."""
        for url in self.uploaded_urls:
            delete_storage_object(self.bucket, url)
        self.uploaded_urls = []
