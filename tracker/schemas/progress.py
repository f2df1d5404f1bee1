from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FrequencyProgress(BaseModel):
    total: int
    completed: int
    percent: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProgressSummary(BaseModel):
    daily: FrequencyProgress
    weekly: FrequencyProgress
    completed_today: int
    day: int
    total_days: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
