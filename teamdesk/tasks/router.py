# teamdesk/tasks/router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status as http_status
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.auth.dependencies import Identity, get_identity
from teamdesk.schemas.task_schema import TaskCreateSchema, TaskUpdateSchema
from teamdesk.serializers import serialize_task
from teamdesk.tasks import service
from teamdesk.tasks.models import TaskStatus

router = APIRouter(prefix="/tasks", tags=["tasks"])


# ---------------------------------------
# GET: list (kanban board feed)
# ---------------------------------------
@router.get("")
def list_tasks(
    project_id: Optional[int] = Query(None, alias="projectId"),
    status: Optional[TaskStatus] = Query(None),
    assignee_id: Optional[int] = Query(None, alias="assigneeId"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    tasks = service.list_tasks(db, identity, project_id=project_id, status=status, assignee_id=assignee_id)
    return {"tasks": [serialize_task(t, with_project=True) for t in tasks]}


@router.post("", status_code=http_status.HTTP_201_CREATED)
def create_task(body: TaskCreateSchema, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    task = service.create_task(
        db,
        identity,
        title=body.title,
        description=body.description,
        priority=body.priority,
        status=body.status,
        project_id=body.project_id,
        assignee_id=body.assignee_id,
    )
    return {"message": "Task created successfully", "task": serialize_task(task)}


@router.get("/{task_id}")
def get_task(task_id: int, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    task = service.get_owned_task(db, identity, task_id)
    return {"task": serialize_task(task, with_project=True)}


# ---------------------------------------
# PATCH: partial update (also what a kanban drop sends)
# ---------------------------------------
@router.patch("/{task_id}")
def update_task(
    task_id: int,
    body: TaskUpdateSchema,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    task = service.update_task(db, identity, task_id, body.model_dump(exclude_unset=True))
    return {"message": "Task updated successfully", "task": serialize_task(task)}


@router.delete("/{task_id}")
def delete_task(task_id: int, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    service.delete_task(db, identity, task_id)
    return {"message": "Task deleted successfully"}
