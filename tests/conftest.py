import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from tracker.core.database import Base, create_db_engine, create_session_factory
from tracker.main import app
from tracker.schemas.task import TaskCreate
from tracker.services.seed_service import seed_default_categories
from tracker.storage.database import DatabaseStorage
from tracker.storage.factory import get_storage
from tracker.storage.memory import MemoryStorage


def make_database_storage():
    """DatabaseStorage sur une base SQLite en mémoire, vide"""
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    return DatabaseStorage(create_session_factory(engine))


BACKENDS = {
    "memory": MemoryStorage,
    "database": make_database_storage,
}


@pytest.fixture(params=sorted(BACKENDS))
def empty_storage(request):
    """Chaque backend, sans aucune catégorie"""
    return BACKENDS[request.param]()


@pytest.fixture
def storage(empty_storage):
    """Chaque backend, avec les 6 catégories par défaut"""
    seed_default_categories(empty_storage)
    return empty_storage


@pytest.fixture
def client():
    """Client de test FastAPI sur un stockage mémoire neuf"""
    storage = MemoryStorage()
    seed_default_categories(storage)
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_task():
    """Fabrique de TaskCreate valides, champs surchargeables"""
    def _make(**overrides) -> TaskCreate:
        data = {
            "name": "Ship release",
            "brief_description": "Write it and get it reviewed",
            "category_slug": "work",
            "frequency": "weekly",
            "due_date": datetime(2026, 10, 20, 9, 0, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return TaskCreate(**data)
    return _make
