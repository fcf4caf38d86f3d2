"""
Коллекции-таблицы: messages, gallery, projects.

Строка на элемент, стабильный id (ObjectId), created_at ставит сервер.
Операции независимы, связи с журналом контента нет.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.schemas.common import ListStatus

logger = logging.getLogger(__name__)


@dataclass
class ListResult:
    """Результат list_all: failed значит «БД недоступна», а не «данных нет»."""

    status: ListStatus
    items: list[dict] = field(default_factory=list)


def _object_id(item_id: str) -> ObjectId | None:
    try:
        return ObjectId(item_id)
    except (InvalidId, TypeError):
        return None


class EntityCollection:
    """CRUD поверх одной коллекции. Документы отдаются как есть, с _id."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def list_all(self) -> ListResult:
        """Все строки, новые первыми. Ошибка БД не пробрасывается, а отдаётся как status=failed."""
        try:
            docs = list(self.collection.find().sort([("created_at", DESCENDING), ("_id", DESCENDING)]))
        except PyMongoError:
            logger.exception("Error fetching %s", self.collection.name)
            return ListResult("failed")
        return ListResult("ok" if docs else "empty", docs)

    def get(self, item_id: str) -> dict | None:
        oid = _object_id(item_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def create(self, fields: dict, created_at: datetime | None = None) -> dict:
        """Вставить строку. id и created_at назначаются здесь."""
        doc = {**fields, "created_at": created_at or datetime.now(timezone.utc)}
        result = self.collection.insert_one(doc)
        return self.collection.find_one({"_id": result.inserted_id})

    def update(self, item_id: str, fields: dict) -> dict | None:
        """Полная замена редактируемых полей. None, если строки нет."""
        oid = _object_id(item_id)
        if oid is None:
            return None
        return self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, item_id: str) -> bool:
        """Удалить строку. False, если строки не было."""
        oid = _object_id(item_id)
        if oid is None:
            return False
        return self.collection.delete_one({"_id": oid}).deleted_count > 0

    def mark_read(self, item_id: str) -> dict | None:
        """Для сообщений: поставить read=true."""
        return self.update(item_id, {"read": True})
