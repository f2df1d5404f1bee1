from fastapi import APIRouter, Depends

from tracker.storage.base import TaskStorage
from tracker.storage.factory import get_storage

router = APIRouter()

@router.get("/z")
def healthz(storage: TaskStorage = Depends(get_storage)):
    # Check si l'API est up, et avec quel stockage
    return {"status": "ok", "storage": type(storage).__name__}
