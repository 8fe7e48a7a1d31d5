from .dates import format_relative_time, get_due_date_status
from .filtering import filter_tasks
from .helpers import category_color
from .sorting import sort_tasks
from .stats import TaskStats, get_task_stats

__all__ = [
    "TaskStats",
    "category_color",
    "filter_tasks",
    "format_relative_time",
    "get_due_date_status",
    "get_task_stats",
    "sort_tasks",
]
