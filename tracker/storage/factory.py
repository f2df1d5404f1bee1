"""Picks the storage backend once per process."""

import logging
from typing import Optional

from tracker.core.config import settings
from tracker.core.database import Base, create_db_engine, create_session_factory
from tracker.services.seed_service import seed_default_categories
from tracker.storage.base import TaskStorage
from tracker.storage.database import DatabaseStorage
from tracker.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

_storage: Optional[TaskStorage] = None


def create_storage(database_url: Optional[str] = None, seed: bool = True) -> TaskStorage:
    """Relational storage when a database URL is given, in-memory otherwise."""
    if database_url:
        engine = create_db_engine(database_url)
        Base.metadata.create_all(bind=engine)
        storage: TaskStorage = DatabaseStorage(create_session_factory(engine))
        logger.info(f"Using database storage ({engine.url.get_backend_name()})")
    else:
        storage = MemoryStorage()
        logger.info("No DATABASE_URL set, using in-memory storage")

    if seed:
        seed_default_categories(storage)
    return storage


def get_storage() -> TaskStorage:
    """Dépendance FastAPI: le stockage de l'application"""
    global _storage
    if _storage is None:
        _storage = create_storage(settings.DATABASE_URL, settings.SEED_DEFAULT_CATEGORIES)
    return _storage
