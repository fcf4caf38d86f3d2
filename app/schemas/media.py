"""
Inline-изображения: base64 прямо в строке коллекции (галерея, проекты).

Проверка размера выполняется до записи: слишком большой файл отклоняется
на валидации запроса, строка не создаётся.
"""
import base64
import binascii

from pydantic import BaseModel, Field, field_validator

from app.core.config import settings


def strip_data_url(value: str) -> str:
    """'data:image/png;base64,AAAA' -> 'AAAA'."""
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def decoded_size(data: str) -> int:
    """Размер в байтах после декодирования base64. ValueError, если строка не base64."""
    try:
        return len(base64.b64decode(data, validate=True))
    except (binascii.Error, ValueError):
        raise ValueError("image_data must be valid base64")


class InlineImage(BaseModel):
    """Поля изображения для тел запросов create/update."""

    image_data: str = Field(..., min_length=1, description="base64, без или с data: префиксом")
    image_type: str = Field(..., description="MIME-тип, например image/png")

    @field_validator("image_data")
    @classmethod
    def check_image_data(cls, value: str) -> str:
        data = "".join(strip_data_url(value.strip()).split())
        limit = settings.MAX_IMAGE_BYTES
        # Быстрый отказ по длине строки, до декодирования
        if len(data) // 4 * 3 > limit + 2 or decoded_size(data) > limit:
            raise ValueError(f"image is larger than {limit // (1024 * 1024)}MB")
        return data

    @field_validator("image_type")
    @classmethod
    def check_image_type(cls, value: str) -> str:
        value = value.strip().lower()
        if not value.startswith("image/"):
            raise ValueError("image_type must be an image/* MIME type")
        return value
