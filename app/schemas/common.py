"""
Структура ответов API: единый формат для успеха и ошибок.

Успех: { "success": true, "data": <payload> }
Список: { "success": true, "status": "ok" | "empty" | "failed", "data": [...] }
Ошибка: { "success": false, "error": "<code>", "message": "<text>" }
"""
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

ListStatus = Literal["ok", "empty", "failed"]


class SuccessResponse(BaseModel, Generic[T]):
    """Успешный ответ: success=true, data: полезная нагрузка."""

    success: bool = True
    data: T | None = Field(default=None, description="Тело ответа")


class ListResponse(BaseModel, Generic[T]):
    """
    Ответ со списком. status отличает «пусто, потому что данных нет» (empty)
    от «пусто, потому что бэкенд недоступен» (failed).
    """

    success: bool = True
    status: ListStatus = "ok"
    data: list[T] = Field(default_factory=list, description="Элементы, новые первыми")


class ErrorResponse(BaseModel):
    """Ответ с ошибкой: success=false, error и message."""

    success: bool = False
    error: str = Field(..., description="Код ошибки (например, not_found, validation_error)")
    message: str = Field(..., description="Человекочитаемое сообщение")


def error_detail(error: str, message: str) -> dict[str, Any]:
    """detail для HTTPException в формате ErrorResponse."""
    return {"error": error, "message": message}
