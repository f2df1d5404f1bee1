from fastapi import APIRouter, Depends

from tracker.schemas.progress import ProgressSummary
from tracker.services.progress_service import summarize_progress
from tracker.storage.base import TaskStorage
from tracker.storage.factory import get_storage

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressSummary)
def get_progress(storage: TaskStorage = Depends(get_storage)):
    """Compteurs du tableau de bord (quotidien, hebdo, aujourd'hui, jour X/30)"""
    return summarize_progress(storage.list_tasks())
