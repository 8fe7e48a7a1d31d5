from datetime import datetime
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..constants import FILTER_ALL, TaskStatusFilter
from ..core import filter_tasks, get_task_stats, sort_tasks
from ..core.dates import get_due_date_status
from ..core.helpers import category_color
from ..database import get_db
from ..models import Task as TaskModel, User
from ..schemas.task import (
    Task as TaskSchema,
    TaskComplete,
    TaskCreate,
    TaskFilters,
    TaskStats as TaskStatsSchema,
    TaskUpdate,
)
from .auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()

SORT_FIELDS = {
    "created_at": TaskModel.created_at,
    "updated_at": TaskModel.updated_at,
    "title": TaskModel.title,
    "due_date": TaskModel.due_date,
}
# Fields that may not be cleared to null by an update.
REQUIRED_FIELDS = {"title", "category", "priority", "completed"}


def _utc_now() -> datetime:
    # Due dates and row timestamps are stored as naive UTC.
    return datetime.utcnow()


def _to_schema(task: TaskModel, now: Optional[datetime] = None) -> TaskSchema:
    data = TaskSchema.model_validate(task)
    return data.model_copy(
        update={
            "due_status": get_due_date_status(task.due_date, now=now or _utc_now()),
            "category_color": category_color(task.category),
        }
    )


def _owned_tasks(db: Session, current_user: User):
    return db.query(TaskModel).filter(TaskModel.user_id == current_user.id)


def _get_owned_task(db: Session, task_id: str, current_user: User) -> TaskModel:
    # A task owned by someone else is reported exactly like a missing one.
    task = _owned_tasks(db, current_user).filter(TaskModel.id == task_id).first()
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("/tasks", response_model=List[TaskSchema])
def list_tasks(
    category: str = FILTER_ALL,
    priority: str = FILTER_ALL,
    status: str = FILTER_ALL,
    search: str = "",
    sort: str = "smart",
    order: str = "desc",
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the current user's tasks, filtered, ordered and paginated."""
    if status not in {s.value for s in TaskStatusFilter}:
        raise HTTPException(status_code=422, detail="Invalid status filter")
    if order not in ("asc", "desc"):
        raise HTTPException(status_code=422, detail="Invalid sort order")
    if sort != "smart" and sort not in SORT_FIELDS:
        raise HTTPException(status_code=422, detail="Invalid sort field")

    query = _owned_tasks(db, current_user)
    if sort == "smart":
        query = query.order_by(TaskModel.created_at.desc())
    else:
        column = SORT_FIELDS[sort]
        query = query.order_by(column.asc() if order == "asc" else column.desc())

    filters = TaskFilters(category=category, priority=priority, status=status, search=search)
    tasks = filter_tasks(query.all(), filters)
    if sort == "smart":
        tasks = sort_tasks(tasks)

    now = _utc_now()
    return [_to_schema(task, now) for task in tasks[skip:skip + limit]]


@router.get("/tasks/stats", response_model=TaskStatsSchema)
def task_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Totals for the current user's tasks."""
    return get_task_stats(_owned_tasks(db, current_user).all(), now=_utc_now()).as_dict()


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new task for the current user."""
    db_task = TaskModel(
        title=task.title,
        description=task.description,
        category=task.category,
        priority=task.priority,
        completed=task.completed,
        due_date=task.due_date,
        user_id=current_user.id,
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("User %s created task %s", current_user.id, db_task.id)
    return _to_schema(db_task)


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a specific task by ID."""
    return _to_schema(_get_owned_task(db, task_id, current_user))


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Apply the fields present in the body; ``due_date: null`` clears it."""
    task = _get_owned_task(db, task_id, current_user)

    for field, value in task_update.model_dump(exclude_unset=True).items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(task, field, value)

    task.updated_at = _utc_now()

    db.commit()
    db.refresh(task)
    logger.info("User %s updated task %s", current_user.id, task.id)
    return _to_schema(task)


@router.patch("/tasks/{task_id}", response_model=TaskSchema)
def toggle_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Flip a task between pending and completed."""
    task = _get_owned_task(db, task_id, current_user)

    task.completed = not task.completed
    task.updated_at = _utc_now()

    db.commit()
    db.refresh(task)
    return _to_schema(task)


@router.patch("/tasks/{task_id}/complete", response_model=TaskSchema)
def mark_task_complete(
    task_id: str,
    payload: Optional[TaskComplete] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Set the completion flag explicitly (defaults to completed)."""
    task = _get_owned_task(db, task_id, current_user)

    task.completed = True if payload is None else payload.completed
    task.updated_at = _utc_now()

    db.commit()
    db.refresh(task)
    return _to_schema(task)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a specific task."""
    task = _get_owned_task(db, task_id, current_user)

    db.delete(task)
    db.commit()
    logger.info("User %s deleted task %s", current_user.id, task_id)
