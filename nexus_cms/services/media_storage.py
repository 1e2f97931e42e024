# nexus_cms/services/media_storage.py
import asyncio
import base64
import binascii
import logging
import re
import time
from typing import Any, Dict, List, Optional

from fastapi import Request, UploadFile
from starlette.concurrency import run_in_threadpool
from supabase import create_client

from nexus_cms.config import settings
from nexus_cms.core.exceptions import BadRequestException, MediaStoreError

logger = logging.getLogger(__name__)

RESOURCE_TYPES = {"image", "video", "raw", "auto"}

DEFAULT_MIME_TYPES = {
    "image": "image/jpeg",
    "video": "video/mp4",
    "raw": "application/octet-stream",
    "auto": "application/octet-stream",
}

DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


class MediaStorage:
    """
    Stateless proxy to an external object store. Subclasses provide the two
    blocking primitives ``_put`` and ``_remove``; everything else (naming,
    size checks, base64 decoding, concurrency) lives here.
    """

    def __init__(self, max_size_mb: int = 50):
        self.max_size_mb = max_size_mb

    def _put(self, path: str, content: bytes, content_type: str) -> str:
        """Store ``content`` at ``path`` and return its public URL."""
        raise NotImplementedError

    def _remove(self, path: str) -> bool:
        """Delete ``path``; False when nothing was stored there."""
        raise NotImplementedError

    def _check_size(self, content: bytes):
        if len(content) > self.max_size_mb * 1024 * 1024:
            raise BadRequestException(f"File too large (max {self.max_size_mb}MB)")

    @staticmethod
    def _public_id(folder: str, suffix: str) -> str:
        return f"{folder}/{folder}_{int(time.time() * 1000)}_{suffix}"

    def _store(
        self,
        content: bytes,
        public_id: str,
        resource_type: str,
        content_type: Optional[str] = None,
        fmt: Optional[str] = None,
    ) -> Dict[str, Any]:
        self._check_size(content)
        content_type = content_type or DEFAULT_MIME_TYPES.get(resource_type, DEFAULT_MIME_TYPES["auto"])
        try:
            url = self._put(public_id, content, content_type)
        except MediaStoreError:
            raise
        except Exception as e:
            logger.exception("Upload of %s failed", public_id)
            raise MediaStoreError(f"Failed to upload file: {e}")

        return {
            "url": url,
            "public_id": public_id,
            "format": fmt or content_type.split("/")[-1],
            "size": len(content),
            "resource_type": resource_type,
        }

    async def upload_file(
        self,
        file: UploadFile,
        folder: str = "nexus",
        resource_type: str = "auto",
        suffix: Optional[str] = None,
    ) -> Dict[str, Any]:
        content = await file.read()
        filename = file.filename or "file"
        stem, _, ext = filename.rpartition(".")
        if not stem:
            stem, ext = filename, ""

        return await run_in_threadpool(
            self._store,
            content,
            self._public_id(folder, suffix if suffix is not None else stem),
            resource_type,
            file.content_type,
            ext.lower() or None,
        )

    async def upload_many(
        self,
        files: List[UploadFile],
        folder: str = "nexus",
        resource_type: str = "auto",
    ) -> List[Dict[str, Any]]:
        # All uploads run concurrently; any failure fails the whole batch
        return await asyncio.gather(*(
            self.upload_file(file, folder, resource_type, suffix=str(index))
            for index, file in enumerate(files)
        ))

    async def upload_base64(
        self,
        data: str,
        folder: str = "nexus",
        resource_type: str = "auto",
    ) -> Dict[str, Any]:
        content_type = None
        match = DATA_URL_RE.match(data.strip())
        if match:
            content_type = match.group("mime")
            data = match.group("data")

        try:
            content = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError):
            raise BadRequestException("Invalid base64 data")

        return await run_in_threadpool(
            self._store, content, self._public_id(folder, "upload"), resource_type, content_type
        )

    async def delete(self, public_id: str) -> Dict[str, str]:
        try:
            removed = await run_in_threadpool(self._remove, public_id)
        except Exception as e:
            logger.exception("Delete of %s failed", public_id)
            raise MediaStoreError(f"Failed to delete file: {e}")
        return {"result": "ok" if removed else "not found"}


class SupabaseStorage(MediaStorage):
    def __init__(self, url: str, service_key: str, bucket: str = "nexus", max_size_mb: int = 50):
        super().__init__(max_size_mb=max_size_mb)
        # Service key: uploads need write access to the bucket
        self.client = create_client(url, service_key)
        self.bucket = bucket

    def _put(self, path: str, content: bytes, content_type: str) -> str:
        bucket = self.client.storage.from_(self.bucket)
        bucket.upload(path, content, {"content-type": content_type})
        return bucket.get_public_url(path)

    def _remove(self, path: str) -> bool:
        removed = self.client.storage.from_(self.bucket).remove([path])
        return bool(removed)


def build_storage() -> Optional[MediaStorage]:
    if not settings.storage_configured:
        logger.warning("SUPABASE_URL/SUPABASE_SERVICE_KEY not set, uploads are disabled")
        return None
    return SupabaseStorage(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_KEY,
        bucket=settings.SUPABASE_BUCKET,
        max_size_mb=settings.UPLOAD_MAX_SIZE_MB,
    )


def get_storage(request: Request) -> MediaStorage:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise MediaStoreError("Media storage is not configured")
    return storage
