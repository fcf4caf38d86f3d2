"""
Схемы для сообщений контактной формы.
"""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class MessageCreate(BaseModel):
    """Тело POST /messages (публичная форма)."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(min_length=1, max_length=5000)


class Message(BaseModel):
    """Сообщение в ответах API."""

    id: str
    name: str
    email: str
    message: str
    read: bool = False
    created_at: datetime


class LegacyImportResult(BaseModel):
    """Итог переноса встроенных сообщений в коллекцию."""

    imported: int
