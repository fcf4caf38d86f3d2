"""
S3 / MinIO клиент для загрузки файлов.

Клиент создаётся в lifespan и хранится в app.state (None, если S3 не настроен).
"""
import re
import uuid

import boto3
from botocore.config import Config
from fastapi import HTTPException, Request

from app.core.config import Settings, settings


def create_s3_client(config: Settings):
    """Создать S3 клиент с таймаутами. None, если ключи не заданы."""
    if not config.S3_ACCESS_KEY:
        return None
    return boto3.client(
        "s3",
        endpoint_url=config.S3_ENDPOINT or None,
        aws_access_key_id=config.S3_ACCESS_KEY,
        aws_secret_access_key=config.S3_SECRET_KEY,
        region_name=config.S3_REGION,
        config=Config(
            signature_version="s3v4",
            connect_timeout=config.S3_TIMEOUT_SECONDS,
            read_timeout=config.S3_TIMEOUT_SECONDS,
            retries={"max_attempts": 2},
        ),
    )


def get_storage(request: Request):
    """Зависимость: S3 клиент приложения. 501, если хранилище не настроено."""
    client = getattr(request.app.state, "s3_client", None)
    if client is None:
        raise HTTPException(
            501, detail={"error": "storage_not_configured", "message": "S3 storage not configured"}
        )
    return client


def build_object_key(file_name: str, content_type: str) -> str:
    """Ключ объекта: images/ для картинок, files/ для остального, uuid-префикс + нормализованное имя."""
    folder = "images" if content_type.startswith("image/") else "files"
    name = re.sub(r"\s+", "-", file_name.strip()).lower() or "file"
    return f"{folder}/{uuid.uuid4().hex}-{name}"


def upload_object(client, key: str, body: bytes, content_type: str) -> str:
    """Положить объект в бакет и вернуть его публичный URL."""
    client.put_object(
        Bucket=settings.S3_BUCKET,
        Key=key,
        Body=body,
        ContentType=content_type,
        CacheControl="max-age=3600",
    )
    return settings.public_url_for(key)
