# teamdesk/projects/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.auth.dependencies import Identity, get_identity
from teamdesk.projects import service
from teamdesk.schemas.project_schema import ProjectSchema
from teamdesk.serializers import serialize_project

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("")
def list_projects(db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    rows = service.list_projects_with_task_counts(db, identity)
    return {"projects": [serialize_project(p, task_count=n) for p, n in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_project(body: ProjectSchema, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    project = service.create_project(db, identity, name=body.name, description=body.description)
    return {"message": "Project created successfully", "project": serialize_project(project)}


@router.get("/{project_id}")
def get_project(project_id: int, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    project = service.get_owned_project(db, identity, project_id)
    tasks = service.project_tasks(db, project)
    return {"project": serialize_project(project, task_count=len(tasks), tasks=tasks)}


@router.patch("/{project_id}")
def update_project(
    project_id: int,
    body: ProjectSchema,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    project = service.update_project(db, identity, project_id, name=body.name, description=body.description)
    return {"message": "Project updated successfully", "project": serialize_project(project)}


@router.delete("/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    service.delete_project(db, identity, project_id)
    return {"message": "Project deleted successfully"}
