# teamdesk/schemas/employee_schema.py
from datetime import date
from decimal import Decimal
from typing import Optional

from teamdesk.schemas.base import CamelModel


class EmployeeSchema(CamelModel):
    """Used for both create and update; every field is required by the service."""

    name: Optional[str] = None
    joining_date: Optional[date] = None
    basic_salary: Optional[Decimal] = None
