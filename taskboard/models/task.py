from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..constants import Category, Priority, TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH

class Task(SQLModel, table=True):
    """A single to-do item, owned by exactly one user."""
    __tablename__ = "tasks"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    category: Category = Field(default=Category.PERSONAL, index=True)
    priority: Priority = Field(default=Priority.MEDIUM, index=True)
    completed: bool = Field(default=False, index=True)
    due_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    user_id: str = Field(foreign_key="users.id", index=True)

    # Relationship back to the owner
    user: Optional["User"] = Relationship(back_populates="tasks")
