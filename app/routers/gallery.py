"""
CRUD для галереи. Чтение публичное, изменения только для администратора.
Изображение хранится в строке как base64.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.security import require_admin
from app.schemas.common import ErrorResponse, ListResponse, SuccessResponse, error_detail
from app.schemas.gallery import GalleryItem, GalleryItemCreate
from app.services.collections import EntityCollection
from app.services.deps import get_gallery

router = APIRouter(prefix="/gallery", tags=["gallery"])

NOT_FOUND = error_detail("not_found", "Gallery item not found")


def _doc_to_item(doc: dict) -> GalleryItem:
    return GalleryItem(
        id=str(doc["_id"]),
        title=doc["title"],
        description=doc.get("description") or "",
        image_data=doc["image_data"],
        image_type=doc["image_type"],
        created_at=doc["created_at"],
    )


@router.get("", response_model=ListResponse[GalleryItem])
def list_gallery(gallery: EntityCollection = Depends(get_gallery)):
    """Все элементы, новые первыми. При недоступной БД пустой список и status=failed."""
    result = gallery.list_all()
    return ListResponse(status=result.status, data=[_doc_to_item(d) for d in result.items])


@router.get(
    "/{item_id}",
    response_model=SuccessResponse[GalleryItem],
    responses={404: {"model": ErrorResponse}},
)
def get_item(item_id: str, gallery: EntityCollection = Depends(get_gallery)):
    """Один элемент по id."""
    doc = gallery.get(item_id)
    if doc is None:
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=_doc_to_item(doc))


@router.post(
    "",
    response_model=SuccessResponse[GalleryItem],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def create_item(
    data: GalleryItemCreate,
    gallery: EntityCollection = Depends(get_gallery),
    _: str = Depends(require_admin),
):
    doc = gallery.create(data.model_dump())
    return SuccessResponse(data=_doc_to_item(doc))


@router.put(
    "/{item_id}",
    response_model=SuccessResponse[GalleryItem],
    responses={404: {"model": ErrorResponse}},
)
def update_item(
    item_id: str,
    data: GalleryItemCreate,
    gallery: EntityCollection = Depends(get_gallery),
    _: str = Depends(require_admin),
):
    doc = gallery.update(item_id, data.model_dump())
    if doc is None:
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=_doc_to_item(doc))


@router.delete(
    "/{item_id}",
    response_model=SuccessResponse[None],
    responses={404: {"model": ErrorResponse}},
)
def delete_item(
    item_id: str,
    gallery: EntityCollection = Depends(get_gallery),
    _: str = Depends(require_admin),
):
    if not gallery.delete(item_id):
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=None)
