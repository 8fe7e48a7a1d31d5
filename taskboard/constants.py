import enum


class Category(str, enum.Enum):
    WORK = "Work"
    PERSONAL = "Personal"
    SHOPPING = "Shopping"
    HEALTH = "Health"
    EDUCATION = "Education"
    FINANCE = "Finance"


class Priority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class TaskStatusFilter(str, enum.Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class DueDateStatus(str, enum.Enum):
    NO_DATE = "no-date"
    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    DUE_SOON = "due-soon"
    FUTURE = "future"


# Wildcard accepted by the category/priority/status filters.
FILTER_ALL = "all"

# Lower rank sorts first.
PRIORITY_RANK = {
    Priority.URGENT.value: 0,
    Priority.HIGH.value: 1,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 3,
}

CATEGORY_COLORS = [
    "bg-blue-100 text-blue-800",
    "bg-green-100 text-green-800",
    "bg-purple-100 text-purple-800",
    "bg-pink-100 text-pink-800",
    "bg-indigo-100 text-indigo-800",
    "bg-teal-100 text-teal-800",
    "bg-mint-100 text-mint-800",
    "bg-magenta-100 text-magenta-800",
]

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128
