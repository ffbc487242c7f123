# teamdesk/schemas/chat_schema.py
from typing import Any, List, Optional

from teamdesk.schemas.base import CamelModel


class ChatRequestSchema(CamelModel):
    message: Optional[str] = None
    projects: Optional[List[Any]] = None
    tasks: Optional[List[Any]] = None
