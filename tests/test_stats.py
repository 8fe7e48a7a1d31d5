# tests/test_stats.py

from datetime import timedelta

from taskboard.constants import DueDateStatus, Priority
from taskboard.core.dates import get_due_date_status
from taskboard.core.stats import TaskStats, get_task_stats


def test_empty_collection(now) -> None:
    assert get_task_stats([], now=now) == TaskStats()


def test_counts(make_task, now) -> None:
    tasks = [
        make_task(priority=Priority.URGENT),
        make_task(priority=Priority.URGENT, completed=True),
        make_task(completed=True, due_date=now - timedelta(days=5)),
        make_task(due_date=now - timedelta(days=2)),
        make_task(due_date=now - timedelta(hours=6)),
        make_task(due_date=now + timedelta(days=1)),
    ]
    stats = get_task_stats(tasks, now=now)

    assert stats.total == len(tasks)
    assert stats.completed == 2
    assert stats.pending == 4
    assert stats.completed + stats.pending == stats.total
    assert stats.urgent == 1
    # Earlier today is not overdue: only whole past days count.
    assert stats.overdue == 1


def test_urgent_task_due_yesterday_counts_twice(make_task, now) -> None:
    task = make_task(priority=Priority.URGENT, due_date=now - timedelta(days=1))

    assert get_due_date_status(task.due_date, now=now) == DueDateStatus.OVERDUE
    stats = get_task_stats([task], now=now)
    assert stats.overdue == 1
    assert stats.urgent == 1


def test_as_dict(make_task, now) -> None:
    stats = get_task_stats([make_task()], now=now)
    assert stats.as_dict() == {"total": 1, "completed": 0, "pending": 1, "urgent": 0, "overdue": 0}
