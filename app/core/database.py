"""
Подключение к MongoDB.

Клиент создаётся в lifespan (main.py) и хранится в app.state,
в обработчики БД попадает через зависимость get_db. Модульного синглтона нет.
"""
from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from app.core.config import Settings

# Имена коллекций
CONTENT_VERSIONS = "content_versions"
MESSAGES = "messages"
GALLERY = "gallery"
PROJECTS = "projects"


def create_mongo_client(config: Settings) -> MongoClient:
    """Создать клиент с явными таймаутами. Вызывается в lifespan при старте."""
    timeout = config.MONGO_TIMEOUT_MS
    return MongoClient(
        config.MONGO_URI,
        serverSelectionTimeoutMS=timeout,
        connectTimeoutMS=timeout,
        socketTimeoutMS=timeout,
        tz_aware=True,
    )


def get_client(request: Request) -> MongoClient:
    """Вернуть клиент MongoDB из состояния приложения."""
    client = getattr(request.app.state, "mongo_client", None)
    if client is None:
        raise RuntimeError("MongoDB not connected. Application lifespan has not started.")
    return client


def get_db(request: Request) -> Database:
    """Зависимость: экземпляр БД для роутеров и сервисов."""
    return get_client(request)[request.app.state.mongo_db_name]


def ensure_indexes(db: Database) -> None:
    """Индексы под сортировки: последняя версия контента и списки newest-first."""
    db[CONTENT_VERSIONS].create_index([("updated_at", -1)])
    for name in (MESSAGES, GALLERY, PROJECTS):
        db[name].create_index([("created_at", -1)])
