"""Storage contract shared by the in-memory and the relational backends.

Business conditions (not found, category in use) are reported through the
return value, never raised. Anything raised comes from the backend itself
(lost connection, driver error) and is left to the caller.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable, List, Optional

from tracker.schemas.category import Category, CategoryCreate, CategoryUpdate
from tracker.schemas.subtask import Subtask, SubtaskCreate
from tracker.schemas.task import TaskCreate, TaskUpdate, TaskWithSubtasks


class CategoryDeleteResult(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    IN_USE = "in_use"


def clean_subtask_descriptions(descriptions: Iterable[str]) -> List[str]:
    """Trimmed descriptions in input order, blank ones dropped."""
    return [d.strip() for d in descriptions if d and d.strip()]


def unique_slug(slug: str, exists: Callable[[str], bool]) -> str:
    """First free slug among slug, slug-2, slug-3..."""
    candidate = slug
    suffix = 2
    while exists(candidate):
        candidate = f"{slug}-{suffix}"
        suffix += 1
    return candidate


class TaskStorage(ABC):

    # Categories

    @abstractmethod
    def list_categories(self) -> List[Category]:
        ...

    @abstractmethod
    def get_category(self, slug: str) -> Optional[Category]:
        ...

    @abstractmethod
    def create_category(self, data: CategoryCreate) -> Category:
        """Create a category. A slug already taken gets a -N suffix instead of failing."""

    @abstractmethod
    def update_category(self, slug: str, changes: CategoryUpdate) -> Optional[Category]:
        ...

    @abstractmethod
    def delete_category(self, slug: str) -> CategoryDeleteResult:
        """Delete a category unless a task still references it."""

    # Tasks

    @abstractmethod
    def list_tasks(self) -> List[TaskWithSubtasks]:
        ...

    @abstractmethod
    def list_tasks_by_frequency(self, frequency: str) -> List[TaskWithSubtasks]:
        ...

    @abstractmethod
    def get_task(self, task_id: int) -> Optional[TaskWithSubtasks]:
        ...

    @abstractmethod
    def create_task(self, data: TaskCreate, subtask_descriptions: Iterable[str] = ()) -> TaskWithSubtasks:
        """Create the task, then one subtask per non-blank description (in order)."""

    @abstractmethod
    def update_task(self, task_id: int, changes: TaskUpdate) -> Optional[TaskWithSubtasks]:
        """Merge the fields set on `changes` onto the stored task."""

    @abstractmethod
    def delete_task(self, task_id: int) -> bool:
        """Delete the task's subtasks, then the task. False if it did not exist."""

    # Subtasks

    @abstractmethod
    def list_subtasks(self, task_id: int) -> List[Subtask]:
        ...

    @abstractmethod
    def create_subtask(self, data: SubtaskCreate) -> Subtask:
        ...

    @abstractmethod
    def update_subtask(self, subtask_id: int, completed: bool) -> Optional[Subtask]:
        ...

    @abstractmethod
    def delete_subtask(self, subtask_id: int) -> bool:
        ...
