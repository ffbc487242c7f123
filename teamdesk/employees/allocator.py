# teamdesk/employees/allocator.py
"""
Sequential, per-owner employee codes: EMP001, EMP002, ... EMP999, EMP1000.

The code is only a suggestion until the row is flushed; the unique
(owner_id, employee_code) constraint settles races and the caller retries
with a fresh code (see employees.service.create_employee).
"""
import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from teamdesk.employees.models import Employee

logger = logging.getLogger(__name__)

EMPLOYEE_CODE_PREFIX = "EMP"
EMPLOYEE_CODE_WIDTH = 3


def format_employee_code(number: int) -> str:
    return f"{EMPLOYEE_CODE_PREFIX}{str(number).zfill(EMPLOYEE_CODE_WIDTH)}"


def parse_employee_code(code: Optional[str]) -> Optional[int]:
    if not code or not code.startswith(EMPLOYEE_CODE_PREFIX):
        return None
    suffix = code[len(EMPLOYEE_CODE_PREFIX):]
    return int(suffix) if suffix.isdigit() else None


def allocate(db: Session, owner_id: int) -> str:
    """Return the next free-looking code for this owner."""
    # Longer codes are numerically larger (EMP1000 > EMP999), so order by length first.
    latest = (
        db.query(Employee.employee_code)
        .filter(Employee.owner_id == owner_id)
        .order_by(func.length(Employee.employee_code).desc(), Employee.employee_code.desc())
        .first()
    )
    if latest is None:
        return format_employee_code(1)

    last_number = parse_employee_code(latest[0])
    if last_number is None:
        # someone stored a hand-made code; fall back to a full scan
        codes = db.query(Employee.employee_code).filter(Employee.owner_id == owner_id).all()
        numbers = [n for n in (parse_employee_code(c) for (c,) in codes) if n is not None]
        last_number = max(numbers, default=0)
        logger.warning("Owner %s has non-standard employee code %r", owner_id, latest[0])

    return format_employee_code(last_number + 1)
