# teamdesk/tasks/service.py
"""
Task lifecycle: create, partial update, delete and list, always scoped to the
caller through the owning project.

There is no transition graph. A card may be dropped into any column, so any
status can move to any other status.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from teamdesk.auth.dependencies import Identity
from teamdesk.employees.service import get_owned_employee
from teamdesk.errors import NotFoundError, ValidationError
from teamdesk.projects.models import Project
from teamdesk.projects.service import get_owned_project
from teamdesk.tasks.models import Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "priority", "status", "assignee_id")


def _owned_tasks(db: Session, identity: Identity):
    return (
        db.query(Task)
        .join(Project, Task.project_id == Project.id)
        .options(selectinload(Task.assignee), selectinload(Task.project))
        .filter(Project.owner_id == identity.user_id)
    )


def get_owned_task(db: Session, identity: Identity, task_id: int) -> Task:
    task = _owned_tasks(db, identity).filter(Task.id == task_id).first()
    if task is None:
        raise NotFoundError("Task not found")
    return task


def list_tasks(
    db: Session,
    identity: Identity,
    project_id: Optional[int] = None,
    status: Optional[TaskStatus] = None,
    assignee_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Task]:
    q = _owned_tasks(db, identity)
    if project_id is not None:
        q = q.filter(Task.project_id == project_id)
    if status is not None:
        q = q.filter(Task.status == TaskStatus(status))
    if assignee_id is not None:
        q = q.filter(Task.assignee_id == assignee_id)
    q = q.order_by(Task.created_at.desc(), Task.id.desc())
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def create_task(
    db: Session,
    identity: Identity,
    *,
    title,
    project_id,
    description=None,
    priority=None,
    status=None,
    assignee_id=None,
) -> Task:
    title = (title or "").strip()
    if not title or project_id is None:
        raise ValidationError("Title and project ID are required")

    project = get_owned_project(db, identity, project_id)
    if assignee_id is not None:
        get_owned_employee(db, identity, assignee_id)

    task = Task(
        title=title,
        description=description or "",
        priority=TaskPriority(priority) if priority else TaskPriority.MEDIUM,
        status=TaskStatus(status) if status else TaskStatus.BACKLOG,
        project_id=project.id,
        assignee_id=assignee_id,
    )
    db.add(task)
    db.commit()
    logger.info("Created task id=%s project=%s owner=%s", task.id, project.id, identity.user_id)
    return get_owned_task(db, identity, task.id)


def update_task(db: Session, identity: Identity, task_id: int, changes: Dict[str, Any]) -> Task:
    """
    Apply a partial update. ``changes`` holds only the fields the client sent:
    a missing key leaves the column alone, ``assignee_id: None`` unassigns.
    """
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown task fields: {', '.join(sorted(unknown))}")

    if "title" in changes and not (changes["title"] or "").strip():
        raise ValidationError("Title is required")
    for field in ("priority", "status"):
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field.capitalize()} cannot be null")

    task = get_owned_task(db, identity, task_id)

    if changes.get("assignee_id") is not None:
        get_owned_employee(db, identity, changes["assignee_id"])

    if "title" in changes:
        task.title = changes["title"].strip()
    if "description" in changes:
        task.description = changes["description"] or ""
    if "priority" in changes:
        task.priority = TaskPriority(changes["priority"])
    if "status" in changes:
        if task.status != TaskStatus(changes["status"]):
            logger.info("Task id=%s moved %s -> %s", task.id, task.status.value, TaskStatus(changes["status"]).value)
        task.status = TaskStatus(changes["status"])
    if "assignee_id" in changes:
        task.assignee_id = changes["assignee_id"]

    db.commit()
    return get_owned_task(db, identity, task_id)


def delete_task(db: Session, identity: Identity, task_id: int) -> None:
    task = get_owned_task(db, identity, task_id)
    db.delete(task)
    db.commit()
    logger.info("Deleted task id=%s owner=%s", task_id, identity.user_id)
