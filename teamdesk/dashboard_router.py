# teamdesk/dashboard_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.auth.dependencies import Identity, get_identity
from teamdesk.employees.service import list_employees_with_task_counts
from teamdesk.projects.service import list_projects_with_task_counts, project_tasks
from teamdesk.serializers import serialize_employee, serialize_project, serialize_task
from teamdesk.tasks.service import list_tasks

router = APIRouter(tags=["dashboard"])

PREVIEW_SIZE = 5


# -----------------------------
# Summary for the landing page
# -----------------------------
@router.get("/dashboard")
def dashboard(db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    employees = list_employees_with_task_counts(db, identity)
    projects = list_projects_with_task_counts(db, identity)
    recent_tasks = list_tasks(db, identity, limit=PREVIEW_SIZE)

    return {
        "employees": [serialize_employee(e, task_count=n) for e, n in employees],
        "projects": [
            serialize_project(p, task_count=n, tasks=project_tasks(db, p, limit=PREVIEW_SIZE))
            for p, n in projects
        ],
        "tasks": [serialize_task(t, with_project=True) for t in recent_tasks],
    }
