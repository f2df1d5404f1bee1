from fastapi import APIRouter, Depends, HTTPException, status

from tracker.schemas.subtask import Subtask, SubtaskCompletion
from tracker.storage.base import TaskStorage
from tracker.storage.factory import get_storage

router = APIRouter(prefix="/subtasks", tags=["subtasks"])


@router.patch("/{subtask_id}", response_model=Subtask)
def update_subtask(subtask_id: int, body: SubtaskCompletion, storage: TaskStorage = Depends(get_storage)):
    subtask = storage.update_subtask(subtask_id, body.completed)
    if not subtask:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subtask not found")
    return subtask


@router.delete("/{subtask_id}")
def delete_subtask(subtask_id: int, storage: TaskStorage = Depends(get_storage)):
    if not storage.delete_subtask(subtask_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subtask not found")
    return {"message": "Subtask deleted successfully"}
