from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from ..constants import FILTER_ALL, TaskStatusFilter
from .helpers import enum_value, task_field


def _criterion(filters: Any, name: str, default: str) -> str:
    if filters is None:
        return default
    if isinstance(filters, Mapping):
        value = filters.get(name, default)
    else:
        value = getattr(filters, name, default)
    value = enum_value(value)
    return default if value is None else value


def _contains(text: Optional[str], needle: str) -> bool:
    return isinstance(text, str) and needle in text.lower()


def _matches(task: Any, category: str, priority: str, status: str, needle: str) -> bool:
    if category != FILTER_ALL and enum_value(task_field(task, "category")) != category:
        return False
    if priority != FILTER_ALL and enum_value(task_field(task, "priority")) != priority:
        return False

    completed = bool(task_field(task, "completed", False))
    if status == TaskStatusFilter.COMPLETED.value:
        if not completed:
            return False
    elif status == TaskStatusFilter.PENDING.value:
        if completed:
            return False
    elif status != FILTER_ALL:
        return False

    if needle:
        return _contains(task_field(task, "title"), needle) or _contains(
            task_field(task, "description"), needle
        )
    return True


def filter_tasks(tasks: Iterable[Any], filters: Any = None) -> List[Any]:
    """Return the tasks matching every criterion, in their original order.

    ``filters`` is a TaskFilters schema, a mapping, or None (no filtering).
    Category, priority and status accept "all"; ``search`` is matched
    case-insensitively against title and description. Values that match
    no known enum simply exclude everything.
    """
    category = _criterion(filters, "category", FILTER_ALL)
    priority = _criterion(filters, "priority", FILTER_ALL)
    status = _criterion(filters, "status", FILTER_ALL)
    needle = (_criterion(filters, "search", "") or "").lower()

    return [task for task in tasks if _matches(task, category, priority, status, needle)]
