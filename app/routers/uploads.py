"""
Загрузка файлов в S3 (фото профиля, резюме и т.п. для контента портфолио).
Возвращает публичный URL, который админка подставляет в контент.
"""
import logging

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.core.config import settings
from app.core.security import require_admin
from app.core.storage import build_object_key, get_storage, upload_object
from app.schemas.common import ErrorResponse, SuccessResponse, error_detail
from app.schemas.upload import UploadResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post(
    "",
    response_model=SuccessResponse[UploadResult],
    status_code=201,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 501: {"model": ErrorResponse}},
)
def upload_file(
    file: UploadFile = File(...),
    _: str = Depends(require_admin),
    s3=Depends(get_storage),
):
    """Сохранить файл в бакет и вернуть его публичный URL."""
    limit = settings.MAX_IMAGE_BYTES
    body = file.file.read(limit + 1)
    if not body:
        raise HTTPException(400, detail=error_detail("empty_file", "No file uploaded"))
    if len(body) > limit:
        raise HTTPException(
            400, detail=error_detail("file_too_large", f"File is larger than {limit // (1024 * 1024)}MB")
        )

    content_type = file.content_type or "application/octet-stream"
    key = build_object_key(file.filename or "file", content_type)
    try:
        url = upload_object(s3, key, body, content_type)
    except (BotoCoreError, ClientError):
        logger.exception("Error uploading %s to storage", key)
        raise HTTPException(500, detail=error_detail("upload_failed", "Failed to upload file to storage"))

    logger.info("Uploaded %s (%d bytes)", key, len(body))
    return SuccessResponse(data=UploadResult(filepath=url, key=key))
