from pydantic import BaseModel, field_validator
from datetime import datetime, timezone
from typing import Optional

from ..constants import (
    Category,
    DESCRIPTION_MAX_LENGTH,
    DueDateStatus,
    FILTER_ALL,
    Priority,
    TITLE_MAX_LENGTH,
)
from ..core.helpers import sanitize_string


def _clean_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = sanitize_string(value)
    if not value:
        raise ValueError("Task title is required")
    if len(value) > TITLE_MAX_LENGTH:
        raise ValueError(f"Task title must be less than {TITLE_MAX_LENGTH} characters")
    return value


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Stored due dates are naive UTC, like the row timestamps.
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _clean_description(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Task description must be less than {DESCRIPTION_MAX_LENGTH} characters")
    return value


class TaskBase(BaseModel):
    """Fields shared by task payloads and responses."""
    title: str
    description: Optional[str] = None
    category: Category = Category.PERSONAL
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    due_date: Optional[datetime] = None

class TaskCreate(TaskBase):
    """Schema for creating new tasks."""

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return _clean_title(value)

    @field_validator("description")
    @classmethod
    def check_description(cls, value: Optional[str]) -> Optional[str]:
        return _clean_description(value)

    @field_validator("due_date")
    @classmethod
    def check_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(value)

class TaskUpdate(BaseModel):
    """Schema for updating existing tasks. Only fields sent are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> Optional[str]:
        return _clean_title(value)

    @field_validator("description")
    @classmethod
    def check_description(cls, value: Optional[str]) -> Optional[str]:
        return _clean_description(value)

    @field_validator("due_date")
    @classmethod
    def check_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(value)

class TaskComplete(BaseModel):
    """Schema for completing a task."""
    completed: bool = True

class Task(TaskBase):
    """Complete task schema with all fields."""
    id: str
    created_at: datetime
    updated_at: datetime
    user_id: str
    due_status: DueDateStatus = DueDateStatus.NO_DATE
    category_color: str = ""

    class Config:
        from_attributes = True

class TaskFilters(BaseModel):
    """Listing criteria. "all" disables the category/priority/status checks."""
    category: str = FILTER_ALL
    priority: str = FILTER_ALL
    status: str = FILTER_ALL
    search: str = ""

class TaskStats(BaseModel):
    total: int
    completed: int
    pending: int
    urgent: int
    overdue: int

    class Config:
        from_attributes = True
