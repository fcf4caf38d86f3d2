"""
Точка входа FastAPI.

lifespan: MongoDB и S3 клиенты создаются при старте, кладутся в app.state
и закрываются при остановке; в обработчики попадают через зависимости.
CORS, rate limit публичных форм, exception handlers (структурированные ответы), роутеры.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.database import create_mongo_client, ensure_indexes
from app.core.storage import create_s3_client
from app.middleware.rate_limit import RateLimitMiddleware
from app.routers import auth, content, gallery, health, messages, projects, uploads
from app.schemas.common import ErrorResponse, SuccessResponse

# Логирование
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл: при старте создаём клиенты Mongo и S3, при остановке закрываем."""
    logger.info("Starting up: connecting to MongoDB...")
    client = create_mongo_client(settings)
    app.state.mongo_client = client
    app.state.mongo_db_name = settings.MONGO_DB_NAME
    try:
        ensure_indexes(client[settings.MONGO_DB_NAME])
    except PyMongoError:
        logger.warning("MongoDB unavailable at startup, indexes not ensured", exc_info=True)
    app.state.s3_client = create_s3_client(settings)
    if app.state.s3_client is None:
        logger.warning("S3 storage not configured, /upload is disabled")
    yield
    logger.info("Shutting down: closing MongoDB...")
    client.close()
    app.state.mongo_client = None


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    body = ErrorResponse(error="internal_server_error", message="An unexpected error occurred")
    return JSONResponse(status_code=500, content=body.model_dump())


async def http_exception_handler(request: Request, exc: HTTPException):
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail and "message" in detail:
        body = ErrorResponse(error=detail["error"], message=detail["message"])
    else:
        body = ErrorResponse(error="request_failed", message=str(detail) if detail else "Request failed")
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Невалидное тело запроса: 400 до любых изменений в БД."""
    errors = exc.errors()
    msg = "; ".join(f"{e.get('loc', [])}: {e.get('msg', '')}" for e in errors[:3])
    body = ErrorResponse(error="validation_error", message=msg or "Validation failed")
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app() -> FastAPI:
    """Собрать приложение. Тесты создают свой экземпляр на каждый тест."""
    application = FastAPI(
        title="Portfolio Content API",
        description="Контент портфолио, галерея, проекты и сообщения. Ответы: success, data / error, message.",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: список origins из конфига; cookie сессии требует allow_credentials
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Rate limit по IP для формы контакта и входа
    application.add_middleware(RateLimitMiddleware)

    application.add_exception_handler(Exception, general_exception_handler)
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    @application.get("/", response_model=SuccessResponse[dict])
    def root():
        return SuccessResponse(data={"message": "Portfolio Content API", "docs": "/docs", "health": "/health"})

    application.include_router(health.router)
    application.include_router(auth.router)
    application.include_router(content.router)
    application.include_router(messages.router)
    application.include_router(gallery.router)
    application.include_router(projects.router)
    application.include_router(uploads.router)
    return application


app = create_app()
