"""
Схемы для галереи.
"""
from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.media import InlineImage


class GalleryItemCreate(InlineImage):
    """Тело запроса при создании и при обновлении (PUT, полная замена)."""

    title: str = Field(min_length=1, max_length=255)
    description: str = ""


class GalleryItem(BaseModel):
    """Элемент галереи в ответах API."""

    id: str
    title: str
    description: str = ""
    image_data: str
    image_type: str
    created_at: datetime
