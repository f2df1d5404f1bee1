from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Schemas sous-tâches


class SubtaskCreate(BaseModel):
    task_id: int
    description: str
    completed: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubtaskIn(BaseModel):
    """Body of POST /api/tasks/{task_id}/subtasks"""
    description: str = Field(..., min_length=1, max_length=500)


class SubtaskCompletion(BaseModel):
    completed: bool


class Subtask(BaseModel):
    id: int
    task_id: int
    description: str
    completed: bool = False

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
