import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tracker.core.config import settings
from tracker.routers import health, tasks, subtasks, categories, progress
from tracker.storage.factory import get_storage

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Init stockage + catégories par défaut au démarrage
    get_storage()
    yield


app = FastAPI(
    title="30-Day Focus Tracker API",
    version="0.1.0",
    lifespan=lifespan,
)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router, prefix="/api")
app.include_router(subtasks.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(progress.router, prefix="/api")
