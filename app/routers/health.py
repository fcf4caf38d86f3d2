"""
Health check: жив ли сервис, доступна ли БД.

Эндпоинт для оркестраторов (Docker, k8s) и мониторинга.
"""
from fastapi import APIRouter, Request
from pymongo.errors import PyMongoError

from app.core.database import get_client
from app.schemas.common import SuccessResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=SuccessResponse[dict])
def health(request: Request):
    """Проверка живости сервиса, MongoDB и наличия хранилища."""
    try:
        get_client(request).admin.command("ping")
        mongo = "connected"
    except (PyMongoError, RuntimeError):
        mongo = "disconnected"
    storage = "configured" if getattr(request.app.state, "s3_client", None) else "not_configured"
    return SuccessResponse(data={"status": "ok", "mongo": mongo, "storage": storage})
