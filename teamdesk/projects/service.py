# teamdesk/projects/service.py
import logging
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from teamdesk.auth.dependencies import Identity
from teamdesk.errors import NotFoundError, ValidationError
from teamdesk.projects.models import Project
from teamdesk.tasks.models import Task

logger = logging.getLogger(__name__)


def _validated(name, description):
    name = (name or "").strip()
    if not name:
        raise ValidationError("Project name is required")
    return name, description or ""


def get_owned_project(db: Session, identity: Identity, project_id: int) -> Project:
    project = (
        db.query(Project)
        .filter(Project.id == project_id, Project.owner_id == identity.user_id)
        .first()
    )
    if project is None:
        raise NotFoundError("Project not found")
    return project


def list_projects_with_task_counts(db: Session, identity: Identity) -> List[Tuple[Project, int]]:
    rows = (
        db.query(Project, func.count(Task.id))
        .outerjoin(Task, Task.project_id == Project.id)
        .filter(Project.owner_id == identity.user_id)
        .group_by(Project.id)
        .order_by(Project.created_at.desc(), Project.id.desc())
        .all()
    )
    return [(project, int(n)) for project, n in rows]


def project_tasks(db: Session, project: Project, limit: int = None) -> List[Task]:
    """Newest first, assignee preloaded."""
    q = (
        db.query(Task)
        .options(selectinload(Task.assignee))
        .filter(Task.project_id == project.id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def create_project(db: Session, identity: Identity, *, name, description=None) -> Project:
    name, description = _validated(name, description)
    project = Project(name=name, description=description, owner_id=identity.user_id)
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Created project id=%s owner=%s", project.id, identity.user_id)
    return project


def update_project(db: Session, identity: Identity, project_id: int, *, name, description=None) -> Project:
    name, description = _validated(name, description)
    project = get_owned_project(db, identity, project_id)
    project.name = name
    project.description = description
    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, identity: Identity, project_id: int) -> None:
    """Deleting a project deletes all of its tasks."""
    project = get_owned_project(db, identity, project_id)
    task_count = len(project.tasks)
    db.delete(project)
    db.commit()
    logger.info("Deleted project id=%s owner=%s with %d tasks", project_id, identity.user_id, task_count)
