# teamdesk/schemas/project_schema.py
from typing import Optional

from teamdesk.schemas.base import CamelModel


class ProjectSchema(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
