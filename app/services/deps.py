"""
Зависимости FastAPI: сервисы поверх БД из app.state.

В тестах достаточно переопределить get_db.
"""
from fastapi import Depends
from pymongo.database import Database

from app.core.database import GALLERY, MESSAGES, PROJECTS, get_db
from app.services.collections import EntityCollection
from app.services.content import ContentStore


def get_content_store(db: Database = Depends(get_db)) -> ContentStore:
    return ContentStore(db)


def get_messages(db: Database = Depends(get_db)) -> EntityCollection:
    return EntityCollection(db[MESSAGES])


def get_gallery(db: Database = Depends(get_db)) -> EntityCollection:
    return EntityCollection(db[GALLERY])


def get_projects(db: Database = Depends(get_db)) -> EntityCollection:
    return EntityCollection(db[PROJECTS])
