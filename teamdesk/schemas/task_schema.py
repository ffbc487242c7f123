# teamdesk/schemas/task_schema.py
from typing import Optional

from pydantic import ConfigDict

from teamdesk.schemas.base import CamelModel
from teamdesk.tasks.models import TaskPriority, TaskStatus


class TaskCreateSchema(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    project_id: Optional[int] = None
    assignee_id: Optional[int] = None


class TaskUpdateSchema(CamelModel):
    """
    PATCH body. A field left out of the JSON is not in ``model_fields_set``
    and must not be touched; ``"assigneeId": null`` is present and clears it.
    Read it with ``model_dump(exclude_unset=True)``.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    assignee_id: Optional[int] = None
