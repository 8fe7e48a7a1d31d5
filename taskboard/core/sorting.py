from datetime import datetime
from typing import Any, Iterable, List

from ..constants import PRIORITY_RANK
from .dates import to_datetime
from .helpers import enum_value, task_field

# Unknown priorities go after Low.
_UNRANKED = len(PRIORITY_RANK)


def sort_tasks(tasks: Iterable[Any]) -> List[Any]:
    """Order tasks for display without touching the input.

    Open tasks first, then by priority (Urgent..Low), then earliest due
    date (undated last), then newest first. Fully tied tasks keep their
    relative order.
    """
    reference = datetime.now()

    def sort_key(task: Any):
        completed = bool(task_field(task, "completed", False))
        rank = PRIORITY_RANK.get(enum_value(task_field(task, "priority")), _UNRANKED)

        due = to_datetime(task_field(task, "due_date"), reference)
        due_key = (0, due.timestamp()) if due is not None else (1, 0.0)

        created = to_datetime(task_field(task, "created_at"), reference)
        created_key = (0, -created.timestamp()) if created is not None else (1, 0.0)

        return (completed, rank, due_key, created_key)

    return sorted(tasks, key=sort_key)
