"""In-memory storage, lives as long as the process"""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from tracker.schemas.category import Category, CategoryCreate, CategoryUpdate
from tracker.schemas.subtask import Subtask, SubtaskCreate
from tracker.schemas.task import Task, TaskCreate, TaskUpdate, TaskWithSubtasks
from tracker.storage.base import (
    CategoryDeleteResult,
    TaskStorage,
    clean_subtask_descriptions,
    unique_slug,
)

logger = logging.getLogger(__name__)


class MemoryStorage(TaskStorage):
    """Dict based backend. Ids come from per-kind counters and are never reused."""

    def __init__(self):
        self._categories: Dict[int, Category] = {}
        self._category_ids: Dict[str, int] = {}  # slug -> id
        self._tasks: Dict[int, Task] = {}
        self._subtasks: Dict[int, Subtask] = {}

        self._category_seq = 1
        self._task_seq = 1
        self._subtask_seq = 1

    # ============ CATEGORIES ============

    def list_categories(self) -> List[Category]:
        return [c.model_copy() for c in self._categories.values()]

    def get_category(self, slug: str) -> Optional[Category]:
        category_id = self._category_ids.get(slug)
        if category_id is None:
            return None
        return self._categories[category_id].model_copy()

    def create_category(self, data: CategoryCreate) -> Category:
        slug = unique_slug(data.slug, lambda s: s in self._category_ids)
        if slug != data.slug:
            logger.info(f"Slug '{data.slug}' already taken, using '{slug}'")

        category = Category(id=self._category_seq, slug=slug, name=data.name, color=data.color)
        self._category_seq += 1

        self._categories[category.id] = category
        self._category_ids[slug] = category.id
        return category.model_copy()

    def update_category(self, slug: str, changes: CategoryUpdate) -> Optional[Category]:
        category_id = self._category_ids.get(slug)
        if category_id is None:
            return None

        updated = self._categories[category_id].model_copy(update=changes.model_dump(exclude_unset=True))
        self._categories[category_id] = updated
        return updated.model_copy()

    def delete_category(self, slug: str) -> CategoryDeleteResult:
        category_id = self._category_ids.get(slug)
        if category_id is None:
            return CategoryDeleteResult.NOT_FOUND

        if any(task.category_slug == slug for task in self._tasks.values()):
            logger.warning(f"Category '{slug}' still used by tasks, not deleted")
            return CategoryDeleteResult.IN_USE

        del self._category_ids[slug]
        del self._categories[category_id]
        logger.info(f"Deleted category '{slug}'")
        return CategoryDeleteResult.DELETED

    # ============ TASKS ============

    def list_tasks(self) -> List[TaskWithSubtasks]:
        return [self._enrich(task) for task in self._newest_first(self._tasks.values())]

    def list_tasks_by_frequency(self, frequency: str) -> List[TaskWithSubtasks]:
        tasks = [task for task in self._tasks.values() if task.frequency == frequency]
        return [self._enrich(task) for task in self._newest_first(tasks)]

    def get_task(self, task_id: int) -> Optional[TaskWithSubtasks]:
        task = self._tasks.get(task_id)
        if task is None:
            return None
        return self._enrich(task)

    def create_task(self, data: TaskCreate, subtask_descriptions: Iterable[str] = ()) -> TaskWithSubtasks:
        task = Task(
            id=self._task_seq,
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._task_seq += 1
        self._tasks[task.id] = task

        for description in clean_subtask_descriptions(subtask_descriptions):
            self.create_subtask(SubtaskCreate(task_id=task.id, description=description))

        logger.info(f"Created task {task.id}")
        return self._enrich(task)

    def update_task(self, task_id: int, changes: TaskUpdate) -> Optional[TaskWithSubtasks]:
        existing = self._tasks.get(task_id)
        if existing is None:
            return None

        # merge, pas de remplacement
        updated = existing.model_copy(update=changes.model_dump(exclude_unset=True))
        self._tasks[task_id] = updated
        return self._enrich(updated)

    def delete_task(self, task_id: int) -> bool:
        if task_id not in self._tasks:
            return False

        owned = [s.id for s in self._subtasks.values() if s.task_id == task_id]
        for subtask_id in owned:
            del self._subtasks[subtask_id]
        del self._tasks[task_id]

        logger.info(f"Deleted task {task_id} and {len(owned)} subtask(s)")
        return True

    # ============ SUBTASKS ============

    def list_subtasks(self, task_id: int) -> List[Subtask]:
        return [s.model_copy() for s in self._subtasks.values() if s.task_id == task_id]

    def create_subtask(self, data: SubtaskCreate) -> Subtask:
        subtask = Subtask(id=self._subtask_seq, **data.model_dump())
        self._subtask_seq += 1
        self._subtasks[subtask.id] = subtask
        return subtask.model_copy()

    def update_subtask(self, subtask_id: int, completed: bool) -> Optional[Subtask]:
        existing = self._subtasks.get(subtask_id)
        if existing is None:
            return None

        updated = existing.model_copy(update={"completed": completed})
        self._subtasks[subtask_id] = updated
        return updated.model_copy()

    def delete_subtask(self, subtask_id: int) -> bool:
        return self._subtasks.pop(subtask_id, None) is not None

    # ============ HELPERS ============

    @staticmethod
    def _newest_first(tasks: Iterable[Task]) -> List[Task]:
        return sorted(tasks, key=lambda t: (t.created_at, t.id), reverse=True)

    def _enrich(self, task: Task) -> TaskWithSubtasks:
        # scan complet des sous-tâches à chaque lecture, suffisant pour un seul utilisateur
        return TaskWithSubtasks(
            **task.model_dump(),
            subtasks=self.list_subtasks(task.id),
            category=self.get_category(task.category_slug),
        )
