"""
Схемы для загрузки файлов.
"""
from pydantic import BaseModel


class UploadResult(BaseModel):
    """Ответ на загрузку: публичный URL и ключ объекта в бакете."""

    filepath: str
    key: str
