"""
Схемы для коллекции projects (раздел проектов в админке).
"""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas.media import InlineImage


class ProjectCreate(InlineImage):
    """Тело запроса при создании и при обновлении (PUT, полная замена)."""

    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    repo_url: str = ""
    demo_url: str = ""
    tech_stack: list[str] = []

    @field_validator("tech_stack")
    @classmethod
    def drop_blank_tags(cls, value: list[str]) -> list[str]:
        return [tag.strip() for tag in value if tag.strip()]


class Project(BaseModel):
    """Проект в ответах API."""

    id: str
    title: str
    description: str = ""
    repo_url: str = ""
    demo_url: str = ""
    tech_stack: list[str] = []
    image_data: str
    image_type: str
    created_at: datetime
