"""SQLAlchemy storage (postgres in prod, sqlite for tests)"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, Iterable, Iterator, List, Optional

from sqlalchemy.orm import Session, sessionmaker

from tracker.models.category import Category as CategoryRow
from tracker.models.subtask import Subtask as SubtaskRow
from tracker.models.task import Task as TaskRow
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


class DatabaseStorage(TaskStorage):
    """Relational backend.

    The tables declare no foreign keys: task -> category and subtask -> task
    are checked here. Each public method runs in its own session and commits
    once, so the cascading operations (task + subtasks) are all-or-nothing.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ============ CATEGORIES ============

    def list_categories(self) -> List[Category]:
        with self._session() as db:
            rows = db.query(CategoryRow).order_by(CategoryRow.id).all()
            return [Category.model_validate(row) for row in rows]

    def get_category(self, slug: str) -> Optional[Category]:
        with self._session() as db:
            row = db.query(CategoryRow).filter(CategoryRow.slug == slug).first()
            return Category.model_validate(row) if row else None

    def create_category(self, data: CategoryCreate) -> Category:
        with self._session() as db:
            slug = unique_slug(data.slug, lambda s: self._slug_taken(db, s))
            if slug != data.slug:
                logger.info(f"Slug '{data.slug}' already taken, using '{slug}'")

            row = CategoryRow(slug=slug, name=data.name, color=data.color)
            db.add(row)
            db.flush()
            return Category.model_validate(row)

    def update_category(self, slug: str, changes: CategoryUpdate) -> Optional[Category]:
        with self._session() as db:
            row = db.query(CategoryRow).filter(CategoryRow.slug == slug).first()
            if not row:
                return None

            for field, value in changes.model_dump(exclude_unset=True).items():
                setattr(row, field, value)
            db.flush()
            return Category.model_validate(row)

    def delete_category(self, slug: str) -> CategoryDeleteResult:
        with self._session() as db:
            row = db.query(CategoryRow).filter(CategoryRow.slug == slug).first()
            if not row:
                return CategoryDeleteResult.NOT_FOUND

            in_use = db.query(TaskRow.id).filter(TaskRow.category_slug == slug).first()
            if in_use:
                logger.warning(f"Category '{slug}' still used by tasks, not deleted")
                return CategoryDeleteResult.IN_USE

            db.delete(row)
            logger.info(f"Deleted category '{slug}'")
            return CategoryDeleteResult.DELETED

    # ============ TASKS ============

    def list_tasks(self) -> List[TaskWithSubtasks]:
        with self._session() as db:
            rows = db.query(TaskRow).order_by(TaskRow.created_at.desc(), TaskRow.id.desc()).all()
            return self._enrich_many(db, rows)

    def list_tasks_by_frequency(self, frequency: str) -> List[TaskWithSubtasks]:
        with self._session() as db:
            rows = (
                db.query(TaskRow)
                .filter(TaskRow.frequency == frequency)
                .order_by(TaskRow.created_at.desc(), TaskRow.id.desc())
                .all()
            )
            return self._enrich_many(db, rows)

    def get_task(self, task_id: int) -> Optional[TaskWithSubtasks]:
        with self._session() as db:
            row = db.query(TaskRow).filter(TaskRow.id == task_id).first()
            if not row:
                return None
            return self._enrich_one(db, row)

    def create_task(self, data: TaskCreate, subtask_descriptions: Iterable[str] = ()) -> TaskWithSubtasks:
        with self._session() as db:
            row = TaskRow(created_at=datetime.now(timezone.utc), **data.model_dump())
            db.add(row)
            db.flush()  # pour avoir l'id

            for description in clean_subtask_descriptions(subtask_descriptions):
                db.add(SubtaskRow(task_id=row.id, description=description, completed=False))
            db.flush()
            db.refresh(row)

            logger.info(f"Created task {row.id}")
            return self._enrich_one(db, row)

    def update_task(self, task_id: int, changes: TaskUpdate) -> Optional[TaskWithSubtasks]:
        with self._session() as db:
            row = db.query(TaskRow).filter(TaskRow.id == task_id).first()
            if not row:
                return None

            for field, value in changes.model_dump(exclude_unset=True).items():
                setattr(row, field, value)
            db.flush()
            db.refresh(row)
            return self._enrich_one(db, row)

    def delete_task(self, task_id: int) -> bool:
        with self._session() as db:
            row = db.query(TaskRow).filter(TaskRow.id == task_id).first()
            if not row:
                return False

            # sous-tâches d'abord, puis la tâche, dans la même transaction
            removed = (
                db.query(SubtaskRow)
                .filter(SubtaskRow.task_id == task_id)
                .delete(synchronize_session=False)
            )
            db.delete(row)

            logger.info(f"Deleted task {task_id} and {removed} subtask(s)")
            return True

    # ============ SUBTASKS ============

    def list_subtasks(self, task_id: int) -> List[Subtask]:
        with self._session() as db:
            return self._subtasks_of(db, task_id)

    def create_subtask(self, data: SubtaskCreate) -> Subtask:
        with self._session() as db:
            row = SubtaskRow(**data.model_dump())
            db.add(row)
            db.flush()
            return Subtask.model_validate(row)

    def update_subtask(self, subtask_id: int, completed: bool) -> Optional[Subtask]:
        with self._session() as db:
            row = db.query(SubtaskRow).filter(SubtaskRow.id == subtask_id).first()
            if not row:
                return None

            row.completed = completed
            db.flush()
            return Subtask.model_validate(row)

    def delete_subtask(self, subtask_id: int) -> bool:
        with self._session() as db:
            removed = db.query(SubtaskRow).filter(SubtaskRow.id == subtask_id).delete(synchronize_session=False)
            return removed > 0

    # ============ HELPERS ============

    @staticmethod
    def _slug_taken(db: Session, slug: str) -> bool:
        return db.query(CategoryRow.id).filter(CategoryRow.slug == slug).first() is not None

    @staticmethod
    def _subtasks_of(db: Session, task_id: int) -> List[Subtask]:
        rows = db.query(SubtaskRow).filter(SubtaskRow.task_id == task_id).order_by(SubtaskRow.id).all()
        return [Subtask.model_validate(row) for row in rows]

    def _enrich_one(self, db: Session, row: TaskRow) -> TaskWithSubtasks:
        category = db.query(CategoryRow).filter(CategoryRow.slug == row.category_slug).first()
        return TaskWithSubtasks(
            **Task.model_validate(row).model_dump(),
            subtasks=self._subtasks_of(db, row.id),
            category=Category.model_validate(category) if category else None,
        )

    def _enrich_many(self, db: Session, rows: List[TaskRow]) -> List[TaskWithSubtasks]:
        """Bulk path: one query for the categories, one for the subtasks."""
        if not rows:
            return []

        categories: Dict[str, Category] = {
            c.slug: Category.model_validate(c) for c in db.query(CategoryRow).all()
        }

        subtasks: Dict[int, List[Subtask]] = {row.id: [] for row in rows}
        subtask_rows = (
            db.query(SubtaskRow)
            .filter(SubtaskRow.task_id.in_(list(subtasks)))
            .order_by(SubtaskRow.id)
            .all()
        )
        for subtask in subtask_rows:
            subtasks[subtask.task_id].append(Subtask.model_validate(subtask))

        return [
            TaskWithSubtasks(
                **Task.model_validate(row).model_dump(),
                subtasks=subtasks[row.id],
                category=categories.get(row.category_slug),
            )
            for row in rows
        ]
