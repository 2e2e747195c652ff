"""
Bucket-addressed object storage for uploaded content images.

Wraps an S3-compatible endpoint (Supabase storage, R2, MinIO, AWS S3).
Objects are served publicly from ``{STORAGE_PUBLIC_URL}/{bucket}/{path}``.
"""
from typing import Iterable, Optional
from urllib.parse import quote

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class StorageError(Exception):
    """Raised when the object store rejects an upload or a removal."""


class ObjectStorage:
    def __init__(self, app=None):
        self._client = None
        self._settings: dict = {}
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._settings = {
            "endpoint_url": app.config.get("STORAGE_ENDPOINT_URL"),
            "access_key_id": app.config.get("STORAGE_ACCESS_KEY_ID"),
            "secret_access_key": app.config.get("STORAGE_SECRET_ACCESS_KEY"),
            "region": app.config.get("STORAGE_REGION", "auto"),
            "public_url": app.config.get("STORAGE_PUBLIC_URL", ""),
        }
        app.extensions["object_storage"] = self

    @property
    def client(self):
        if self._client is None:
            config = Config(
                signature_version="s3v4",
                s3={"addressing_style": "path"},
            )
            self._client = boto3.client(
                "s3",
                endpoint_url=self._settings.get("endpoint_url"),
                aws_access_key_id=self._settings.get("access_key_id"),
                aws_secret_access_key=self._settings.get("secret_access_key"),
                region_name=self._settings.get("region"),
                config=config,
            )
        return self._client

    def exists(self, bucket: str, path: str) -> bool:
        try:
            self.client.head_object(Bucket=bucket, Key=path)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in NOT_FOUND_CODES:
                return False
            raise StorageError(str(e)) from e
        except BotoCoreError as e:
            raise StorageError(str(e)) from e

    def upload(self, bucket: str, path: str, data: bytes, content_type: str, upsert: bool = True) -> None:
        if not upsert and self.exists(bucket, path):
            raise StorageError(f"Object already exists: {bucket}/{path}")
        try:
            self.client.put_object(
                Bucket=bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(str(e)) from e

    def remove(self, bucket: str, paths: Iterable[str]) -> None:
        for path in paths:
            try:
                self.client.delete_object(Bucket=bucket, Key=path)
            except ClientError as e:
                # Already gone
                if e.response.get("Error", {}).get("Code") in NOT_FOUND_CODES:
                    continue
                raise StorageError(str(e)) from e
            except BotoCoreError as e:
                raise StorageError(str(e)) from e

    def get_public_url(self, bucket: str, path: str) -> str:
        base = (self._settings.get("public_url") or "").rstrip("/")
        return f"{base}/{bucket}/{quote(path)}"


def get_storage() -> "ObjectStorage":
    """Return the object storage bound to the current app."""
    storage: Optional[ObjectStorage] = current_app.extensions.get("object_storage")
    if storage is None:
        raise RuntimeError("Object storage is not initialised for this app")
    return storage
