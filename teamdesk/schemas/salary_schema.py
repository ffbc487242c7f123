# teamdesk/schemas/salary_schema.py
from decimal import Decimal
from typing import Any, List, Optional

from teamdesk.schemas.base import CamelModel


class SalaryRecordSchema(CamelModel):
    # checked per record by the ledger
    employee_id: Optional[Any] = None
    basic_salary: Optional[Decimal] = None
    bonus: Optional[Decimal] = None
    deduction: Optional[Decimal] = None
    net_salary: Optional[Decimal] = None


class SalaryBatchSchema(CamelModel):
    month: Optional[int] = None
    year: Optional[int] = None
    salaries: Optional[List[SalaryRecordSchema]] = None
