"""Progress service"""

from datetime import datetime, date, timezone
from typing import List, Optional

from tracker.core.config import settings
from tracker.schemas.progress import FrequencyProgress, ProgressSummary
from tracker.schemas.task import Task


def utc_today() -> date:
    """Date du jour en UTC, comme les dates stockées"""
    return datetime.now(timezone.utc).date()


def _as_date(value: datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def frequency_progress(tasks: List[Task], frequency: str) -> FrequencyProgress:
    selected = [t for t in tasks if t.frequency == frequency]
    done = sum(1 for t in selected if t.completed)
    percent = round(done / len(selected) * 100, 1) if selected else 0.0
    return FrequencyProgress(total=len(selected), completed=done, percent=percent)


def get_completed_today(tasks: List[Task], today: Optional[date] = None) -> int:
    """Completed tasks that were due today."""
    today = today or utc_today()
    return sum(1 for t in tasks if t.completed and _as_date(t.due_date) == today)


def get_focus_day(tasks: List[Task], today: Optional[date] = None, total_days: Optional[int] = None) -> int:
    """
    Jour courant dans la fenêtre de focus.

    Day 1 is the day the first task was created; the count stops at the end
    of the window. 0 when nothing has been created yet.
    """
    today = today or utc_today()
    total_days = total_days or settings.FOCUS_WINDOW_DAYS
    if not tasks:
        return 0

    start = min(_as_date(t.created_at) for t in tasks)
    elapsed = (today - start).days + 1
    return max(1, min(elapsed, total_days))


def summarize_progress(tasks: List[Task], today: Optional[date] = None) -> ProgressSummary:
    total_days = settings.FOCUS_WINDOW_DAYS
    return ProgressSummary(
        daily=frequency_progress(tasks, "daily"),
        weekly=frequency_progress(tasks, "weekly"),
        completed_today=get_completed_today(tasks, today),
        day=get_focus_day(tasks, today, total_days),
        total_days=total_days,
    )
