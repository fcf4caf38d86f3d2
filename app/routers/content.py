"""
Контент портфолио: чтение для публичной страницы и правка из админки.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.core.security import require_admin
from app.schemas.common import ErrorResponse, SuccessResponse, error_detail
from app.schemas.content import PortfolioContent, PortfolioContentUpdate
from app.services.content import ContentStore
from app.services.deps import get_content_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


@router.get("", response_model=SuccessResponse[PortfolioContent])
def get_content(response: Response, store: ContentStore = Depends(get_content_store)):
    """Актуальная версия. X-Content-Source: stored | seeded | fallback."""
    result = store.fetch_latest()
    if result.source == "fallback":
        logger.warning("Serving default portfolio content, backend unavailable")
    response.headers["X-Content-Source"] = result.source
    return SuccessResponse(data=result.content)


@router.put(
    "",
    response_model=SuccessResponse[PortfolioContent],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def update_content(
    data: PortfolioContentUpdate,
    store: ContentStore = Depends(get_content_store),
    username: str = Depends(require_admin),
):
    """Мёрж переданных полей поверх текущей версии и запись новой версии."""
    result = store.save(data.changes())
    if not result.success:
        raise HTTPException(500, detail=error_detail("update_failed", result.message))
    logger.info("Portfolio content updated by %r", username)
    return SuccessResponse(data=result.content)
