"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Optional, List, Literal

from tracker.schemas.category import Category
from tracker.schemas.subtask import Subtask

Frequency = Literal["daily", "weekly"]
Priority = Literal["low", "medium", "high"]

FREQUENCIES = ("daily", "weekly")

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC datetime; a naive value is taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    brief_description: str = Field(..., max_length=500)
    detailed_description: Optional[str] = None
    category_slug: str = Field(..., min_length=1)
    frequency: Frequency
    due_date: datetime
    priority: Priority = "medium"
    completed: bool = False

    model_config = _camel

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value):
        return as_utc(value)


class TaskUpdate(BaseModel):
    """Partial update, only the fields actually sent are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    brief_description: Optional[str] = Field(None, max_length=500)
    detailed_description: Optional[str] = None
    category_slug: Optional[str] = Field(None, min_length=1)
    frequency: Optional[Frequency] = None
    due_date: Optional[datetime] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None

    model_config = _camel

    @field_validator(
        "name", "brief_description", "category_slug", "frequency", "due_date", "priority", "completed"
    )
    @classmethod
    def not_null(cls, value):
        # seul detailed_description accepte null
        if value is None:
            raise ValueError("field may not be null")
        return value

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value):
        return as_utc(value)


class TaskCreateRequest(BaseModel):
    """Body of POST /api/tasks: the task plus its subtask descriptions"""
    task: TaskCreate
    subtasks: List[str] = []


class Task(BaseModel):
    id: int
    name: str
    brief_description: str
    detailed_description: Optional[str] = None
    category_slug: str
    frequency: Frequency
    due_date: datetime
    priority: Priority = "medium"
    completed: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("due_date", "created_at")
    @classmethod
    def stored_dates_utc(cls, value):
        # sqlite rend des datetimes naïfs
        return as_utc(value)


class TaskWithSubtasks(Task):
    """Read model: a task with its subtasks and resolved category. Never stored."""

    subtasks: List[Subtask] = []
    category: Optional[Category] = None
