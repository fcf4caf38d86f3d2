"""
Сообщения контактной формы.

POST публичный (с rate limit), остальное только для администратора.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.security import require_admin
from app.schemas.common import ErrorResponse, ListResponse, SuccessResponse, error_detail
from app.schemas.message import LegacyImportResult, Message, MessageCreate
from app.services.collections import EntityCollection
from app.services.content import ContentStore
from app.services.deps import get_content_store, get_messages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])

NOT_FOUND = error_detail("not_found", "Message not found")


def _doc_to_message(doc: dict) -> Message:
    return Message(
        id=str(doc["_id"]),
        name=doc["name"],
        email=doc["email"],
        message=doc["message"],
        read=doc.get("read", False),
        created_at=doc["created_at"],
    )


@router.get("", response_model=ListResponse[Message])
def list_messages(
    messages: EntityCollection = Depends(get_messages),
    _: str = Depends(require_admin),
):
    """Все сообщения, новые первыми."""
    result = messages.list_all()
    return ListResponse(status=result.status, data=[_doc_to_message(d) for d in result.items])


@router.post("", response_model=SuccessResponse[Message], status_code=status.HTTP_201_CREATED)
def create_message(data: MessageCreate, messages: EntityCollection = Depends(get_messages)):
    """Отправка контактной формы."""
    doc = messages.create({**data.model_dump(), "read": False})
    logger.info("New contact message from %s", data.email)
    return SuccessResponse(data=_doc_to_message(doc))


@router.post(
    "/import-legacy",
    response_model=SuccessResponse[LegacyImportResult],
    responses={500: {"model": ErrorResponse}},
)
def import_legacy_messages(
    messages: EntityCollection = Depends(get_messages),
    store: ContentStore = Depends(get_content_store),
    _: str = Depends(require_admin),
):
    """Перенести сообщения из контента портфолио в коллекцию messages."""
    try:
        imported = store.migrate_legacy_messages(messages)
    except RuntimeError as exc:
        raise HTTPException(500, detail=error_detail("backend_unavailable", str(exc)))
    return SuccessResponse(data=LegacyImportResult(imported=imported))


@router.patch(
    "/{message_id}/read",
    response_model=SuccessResponse[Message],
    responses={404: {"model": ErrorResponse}},
)
def mark_read(
    message_id: str,
    messages: EntityCollection = Depends(get_messages),
    _: str = Depends(require_admin),
):
    """Отметить сообщение прочитанным."""
    doc = messages.mark_read(message_id)
    if doc is None:
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=_doc_to_message(doc))


@router.delete(
    "/{message_id}",
    response_model=SuccessResponse[None],
    responses={404: {"model": ErrorResponse}},
)
def delete_message(
    message_id: str,
    messages: EntityCollection = Depends(get_messages),
    _: str = Depends(require_admin),
):
    """Удалить сообщение."""
    if not messages.delete(message_id):
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=None)
