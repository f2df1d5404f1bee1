from datetime import date, datetime, timezone

from tracker.schemas.task import Task
from tracker.services.progress_service import (
    frequency_progress,
    get_completed_today,
    get_focus_day,
    summarize_progress,
    utc_today,
)
from tracker.storage.factory import create_storage

TODAY = date(2026, 10, 17)


def make(task_id, frequency="daily", completed=False, due=TODAY, created=date(2026, 10, 10)):
    return Task(
        id=task_id,
        name=f"task {task_id}",
        brief_description="",
        category_slug="work",
        frequency=frequency,
        due_date=datetime(due.year, due.month, due.day, 9, 0, tzinfo=timezone.utc),
        completed=completed,
        created_at=datetime(created.year, created.month, created.day, 12, 0, tzinfo=timezone.utc),
    )


# ============ TESTS progress_service.py ============

def test_frequency_progress():
    tasks = [make(1, completed=True), make(2), make(3, "weekly", completed=True), make(4)]

    daily = frequency_progress(tasks, "daily")
    assert (daily.total, daily.completed, daily.percent) == (3, 1, 33.3)

    weekly = frequency_progress(tasks, "weekly")
    assert (weekly.total, weekly.completed, weekly.percent) == (1, 1, 100.0)


def test_frequency_progress_no_tasks():
    progress = frequency_progress([], "weekly")
    assert (progress.total, progress.completed, progress.percent) == (0, 0, 0.0)


def test_completed_today_counts_only_done_and_due_today():
    tasks = [
        make(1, completed=True),
        make(2, completed=False),
        make(3, completed=True, due=date(2026, 10, 16)),
    ]
    assert get_completed_today(tasks, TODAY) == 1


def test_focus_day():
    assert get_focus_day([], TODAY, 30) == 0
    assert get_focus_day([make(1, created=TODAY)], TODAY, 30) == 1
    assert get_focus_day([make(1), make(2, created=date(2026, 10, 15))], TODAY, 30) == 8
    # plafonné à la fin de la fenêtre
    assert get_focus_day([make(1, created=date(2026, 1, 1))], TODAY, 30) == 30


def test_utc_today_matches_utc_clock():
    assert utc_today() == datetime.now(timezone.utc).date()


def test_default_today_is_the_utc_date(monkeypatch):
    """Sans date explicite, 'aujourd'hui' est la date UTC"""
    monkeypatch.setattr("tracker.services.progress_service.utc_today", lambda: TODAY)
    tasks = [make(1, completed=True), make(2, created=date(2026, 10, 15))]

    assert get_completed_today(tasks) == 1
    assert get_focus_day(tasks, total_days=30) == 8
    assert summarize_progress(tasks).completed_today == 1


def test_summarize_progress():
    summary = summarize_progress([make(1, completed=True), make(2, "weekly")], TODAY)

    assert summary.daily.completed == 1
    assert summary.weekly.total == 1
    assert summary.completed_today == 1
    assert summary.day == 8
    assert summary.total_days == 30


def test_progress_endpoint(client):
    client.post(
        "/api/tasks",
        json={
            "task": {
                "name": "Stretch",
                "briefDescription": "10 minutes",
                "categorySlug": "health",
                "frequency": "daily",
                "dueDate": "2026-10-18T07:00:00Z",
                "completed": True,
            }
        },
    )

    response = client.get("/api/progress")

    assert response.status_code == 200
    data = response.json()
    assert data["daily"] == {"total": 1, "completed": 1, "percent": 100.0}
    assert data["weekly"]["total"] == 0
    assert data["day"] == 1
    assert data["totalDays"] == 30


# ============ TESTS storage factory ============

def test_create_storage_defaults_to_memory():
    storage = create_storage(None)
    assert type(storage).__name__ == "MemoryStorage"
    assert len(storage.list_categories()) == 6


def test_create_storage_with_database_url():
    storage = create_storage("sqlite://")
    assert type(storage).__name__ == "DatabaseStorage"
    assert len(storage.list_categories()) == 6


def test_create_storage_without_seed():
    assert create_storage(None, seed=False).list_categories() == []


def test_healthz(client):
    response = client.get("/health/z")
    assert response.json() == {"status": "ok", "storage": "MemoryStorage"}
