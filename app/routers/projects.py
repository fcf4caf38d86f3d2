"""
CRUD для коллекции projects (менеджер проектов в админке).

Это отдельная от контента портфолио сущность: главная страница
показывает проекты из контента, эта коллекция с ними не синхронизируется.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.security import require_admin
from app.schemas.common import ErrorResponse, ListResponse, SuccessResponse, error_detail
from app.schemas.project import Project, ProjectCreate
from app.services.collections import EntityCollection
from app.services.deps import get_projects

router = APIRouter(prefix="/projects", tags=["projects"])

NOT_FOUND = error_detail("not_found", "Project not found")


def _doc_to_project(doc: dict) -> Project:
    return Project(
        id=str(doc["_id"]),
        title=doc["title"],
        description=doc.get("description") or "",
        repo_url=doc.get("repo_url") or "",
        demo_url=doc.get("demo_url") or "",
        tech_stack=doc.get("tech_stack") or [],
        image_data=doc["image_data"],
        image_type=doc["image_type"],
        created_at=doc["created_at"],
    )


@router.get("", response_model=ListResponse[Project])
def list_projects(projects: EntityCollection = Depends(get_projects)):
    """Все проекты, новые первыми."""
    result = projects.list_all()
    return ListResponse(status=result.status, data=[_doc_to_project(d) for d in result.items])


@router.get(
    "/{project_id}",
    response_model=SuccessResponse[Project],
    responses={404: {"model": ErrorResponse}},
)
def get_project(project_id: str, projects: EntityCollection = Depends(get_projects)):
    """Один проект по id."""
    doc = projects.get(project_id)
    if doc is None:
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=_doc_to_project(doc))


@router.post(
    "",
    response_model=SuccessResponse[Project],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def create_project(
    data: ProjectCreate,
    projects: EntityCollection = Depends(get_projects),
    _: str = Depends(require_admin),
):
    doc = projects.create(data.model_dump())
    return SuccessResponse(data=_doc_to_project(doc))


@router.put(
    "/{project_id}",
    response_model=SuccessResponse[Project],
    responses={404: {"model": ErrorResponse}},
)
def update_project(
    project_id: str,
    data: ProjectCreate,
    projects: EntityCollection = Depends(get_projects),
    _: str = Depends(require_admin),
):
    doc = projects.update(project_id, data.model_dump())
    if doc is None:
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=_doc_to_project(doc))


@router.delete(
    "/{project_id}",
    response_model=SuccessResponse[None],
    responses={404: {"model": ErrorResponse}},
)
def delete_project(
    project_id: str,
    projects: EntityCollection = Depends(get_projects),
    _: str = Depends(require_admin),
):
    if not projects.delete(project_id):
        raise HTTPException(404, detail=NOT_FOUND)
    return SuccessResponse(data=None)
