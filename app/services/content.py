"""
Журнал версий контента (blob log).

Каждое сохранение не обновляет документ, а вставляет полную копию агрегата
со свежим updated_at. Актуальна самая новая версия, старые только хранятся.

Гонка: два save, прочитавшие одну и ту же версию, вставят каждый свою копию.
Выживает последняя вставленная целиком, изменения другой теряются (lost update).
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from pydantic import ValidationError
from pymongo import DESCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.database import CONTENT_VERSIONS
from app.schemas.content import PortfolioContent, default_content
from app.services.collections import EntityCollection

logger = logging.getLogger(__name__)

ContentSource = Literal["stored", "seeded", "fallback"]


@dataclass
class ContentResult:
    """
    Результат чтения. source:
    stored: версия из БД; seeded: БД была пуста, записали дефолт;
    fallback: БД недоступна, отдали дефолт без записи.
    """

    content: PortfolioContent
    source: ContentSource


@dataclass
class SaveResult:
    success: bool
    message: str
    content: PortfolioContent | None = None


def merge_content(current: PortfolioContent, changes: dict) -> PortfolioContent:
    """Поверхностный мёрж: переданные поля верхнего уровня заменяют прежние целиком."""
    merged = {**current.model_dump(), **changes}
    return PortfolioContent.model_validate(merged)


class ContentStore:
    """Чтение/запись контента через коллекцию версий."""

    def __init__(self, db: Database):
        self.versions = db[CONTENT_VERSIONS]

    def _latest_doc(self) -> dict | None:
        return self.versions.find_one(
            {}, sort=[("updated_at", DESCENDING), ("_id", DESCENDING)]
        )

    def append_version(self, content: PortfolioContent) -> None:
        """Вставить новую полную версию. Ошибки БД пробрасываются."""
        self.versions.insert_one(
            {"data": content.model_dump(), "updated_at": datetime.now(timezone.utc)}
        )

    def fetch_latest(self) -> ContentResult:
        """Последняя версия; при пустой БД засевает дефолт; при ошибке: дефолт без записи."""
        try:
            doc = self._latest_doc()
            if doc is not None:
                return ContentResult(PortfolioContent.model_validate(doc["data"]), "stored")
        except (PyMongoError, ValidationError, KeyError):
            logger.exception("Failed to read portfolio content, serving defaults")
            return ContentResult(default_content(), "fallback")

        logger.info("No portfolio content found, initializing with defaults")
        content = default_content()
        try:
            self.append_version(content)
        except PyMongoError:
            logger.exception("Failed to persist default portfolio content")
            return ContentResult(content, "fallback")
        return ContentResult(content, "seeded")

    def save(self, changes: dict) -> SaveResult:
        """
        Мёрж changes поверх текущей версии и вставка результата как новой версии.
        Если текущую версию прочитать не удалось, не пишем: иначе дефолт затрёт контент.
        """
        current = self.fetch_latest()
        if current.source == "fallback":
            return SaveResult(False, "Portfolio content is unavailable, update rejected")

        try:
            updated = merge_content(current.content, changes)
        except ValidationError as exc:
            logger.warning("Rejected portfolio update: %s", exc)
            return SaveResult(False, "Invalid portfolio content")

        try:
            self.append_version(updated)
        except PyMongoError:
            logger.exception("Error updating portfolio content")
            return SaveResult(False, "Failed to update portfolio data")
        return SaveResult(True, "Portfolio data updated successfully", updated)

    def migrate_legacy_messages(self, messages: EntityCollection) -> int:
        """
        Перенести сообщения, встроенные в агрегат, в коллекцию messages
        и сохранить новую версию с пустым списком. Возвращает число перенесённых.
        """
        current = self.fetch_latest()
        if current.source == "fallback":
            raise RuntimeError("Portfolio content is unavailable")

        legacy = current.content.messages
        if not legacy:
            return 0

        for item in legacy:
            fields = {"name": item.name, "email": item.email, "message": item.message, "read": False}
            created_at = _parse_date(item.date)
            messages.create(fields, created_at=created_at)

        self.append_version(merge_content(current.content, {"messages": []}))
        logger.info("Moved %d legacy messages into the messages collection", len(legacy))
        return len(legacy)


def _parse_date(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
