from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from tracker.schemas.subtask import Subtask, SubtaskCreate, SubtaskIn
from tracker.schemas.task import FREQUENCIES, TaskCreateRequest, TaskUpdate, TaskWithSubtasks
from tracker.storage.base import TaskStorage
from tracker.storage.factory import get_storage

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskWithSubtasks])
def list_tasks(storage: TaskStorage = Depends(get_storage)):
    return storage.list_tasks()


@router.get("/frequency/{frequency}", response_model=List[TaskWithSubtasks])
def list_tasks_by_frequency(frequency: str, storage: TaskStorage = Depends(get_storage)):
    if frequency not in FREQUENCIES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid frequency. Must be 'daily' or 'weekly'",
        )
    return storage.list_tasks_by_frequency(frequency)


@router.get("/{task_id}", response_model=TaskWithSubtasks)
def get_task(task_id: int, storage: TaskStorage = Depends(get_storage)):
    task = storage.get_task(task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post("", response_model=TaskWithSubtasks, status_code=status.HTTP_201_CREATED)
def create_task(body: TaskCreateRequest, storage: TaskStorage = Depends(get_storage)):
    return storage.create_task(body.task, body.subtasks)


@router.patch("/{task_id}", response_model=TaskWithSubtasks)
def update_task(task_id: int, changes: TaskUpdate, storage: TaskStorage = Depends(get_storage)):
    task = storage.update_task(task_id, changes)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.delete("/{task_id}")
def delete_task(task_id: int, storage: TaskStorage = Depends(get_storage)):
    if not storage.delete_task(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return {"message": "Task deleted successfully"}


# Sous-tâches d'une tâche

@router.get("/{task_id}/subtasks", response_model=List[Subtask])
def list_subtasks(task_id: int, storage: TaskStorage = Depends(get_storage)):
    if not storage.get_task(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return storage.list_subtasks(task_id)


@router.post("/{task_id}/subtasks", response_model=Subtask, status_code=status.HTTP_201_CREATED)
def create_subtask(task_id: int, body: SubtaskIn, storage: TaskStorage = Depends(get_storage)):
    # le stockage ne vérifie pas que la tâche existe
    if not storage.get_task(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

    description = body.description.strip()
    if not description:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Description is blank")
    return storage.create_subtask(SubtaskCreate(task_id=task_id, description=description))
