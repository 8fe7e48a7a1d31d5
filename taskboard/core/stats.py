from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from ..constants import Priority
from .dates import is_overdue
from .helpers import enum_value, task_field


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    completed: int = 0
    pending: int = 0
    urgent: int = 0
    overdue: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def get_task_stats(tasks: Iterable[Any], now: Optional[datetime] = None) -> TaskStats:
    """Count total, completed, pending, open-urgent and open-overdue tasks."""
    current = now if now is not None else datetime.now()
    total = completed = urgent = overdue = 0

    for task in tasks:
        total += 1
        if task_field(task, "completed", False):
            completed += 1
            continue
        if enum_value(task_field(task, "priority")) == Priority.URGENT.value:
            urgent += 1
        if is_overdue(task_field(task, "due_date"), current):
            overdue += 1

    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        urgent=urgent,
        overdue=overdue,
    )
