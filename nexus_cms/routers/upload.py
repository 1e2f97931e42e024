import logging
from enum import Enum
from typing import List, Optional

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from nexus_cms.core.exceptions import BadRequestException, MediaStoreError
from nexus_cms.services.media_storage import RESOURCE_TYPES, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()


class UploadAction(str, Enum):
    UPLOAD_SINGLE = "upload-single"
    UPLOAD_MULTIPLE = "upload-multiple"
    UPLOAD_BASE64 = "upload-base64"


def _failure(error: str, e: MediaStoreError) -> JSONResponse:
    # Unlike the content endpoints, the store's message is echoed back
    return JSONResponse(status_code=500, content={"error": error, "details": e.message})


@router.post("")
async def upload(
    request: Request,
    action: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    files: Optional[List[UploadFile]] = File(None),
    base64: Optional[str] = Form(None),
    folder: str = Form("nexus"),
    resource_type: str = Form("auto"),
):
    """Forward one file, several files or a base64 payload to the media store."""
    try:
        upload_action = UploadAction(action)
    except ValueError:
        raise BadRequestException("Invalid action")

    if resource_type not in RESOURCE_TYPES:
        raise BadRequestException("Invalid resource_type")
    folder = folder or "nexus"

    try:
        storage = get_storage(request)

        if upload_action is UploadAction.UPLOAD_SINGLE:
            if file is None:
                raise BadRequestException("No file provided")
            data = await storage.upload_file(file, folder, resource_type)

        elif upload_action is UploadAction.UPLOAD_MULTIPLE:
            if not files:
                raise BadRequestException("No files provided")
            data = await storage.upload_many(files, folder, resource_type)

        else:
            if not base64:
                raise BadRequestException("No base64 data provided")
            data = await storage.upload_base64(base64, folder, resource_type)

    except MediaStoreError as e:
        logger.error("Upload failed: %s", e.message)
        return _failure("Upload failed", e)

    return {"success": True, "data": data}


@router.delete("")
async def delete_upload(request: Request, public_id: Optional[str] = None):
    if not public_id:
        raise BadRequestException("Public ID is required")

    try:
        result = await get_storage(request).delete(public_id)
    except MediaStoreError as e:
        logger.error("Delete failed: %s", e.message)
        return _failure("Delete failed", e)

    return {"success": True, "data": result}
