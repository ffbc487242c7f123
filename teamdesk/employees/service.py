# teamdesk/employees/service.py
import logging
from decimal import Decimal
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from teamdesk.auth.dependencies import Identity
from teamdesk.employees.allocator import allocate
from teamdesk.employees.models import Employee
from teamdesk.errors import NotFoundError, UpstreamError, ValidationError
from teamdesk.tasks.models import Task

logger = logging.getLogger(__name__)

MAX_ALLOCATION_ATTEMPTS = 5


def _validated_fields(name, joining_date, basic_salary):
    name = (name or "").strip()
    if not name or joining_date is None or basic_salary is None:
        raise ValidationError("All fields are required")
    basic_salary = Decimal(basic_salary)
    if basic_salary < 0:
        raise ValidationError("Basic salary cannot be negative")
    return name, joining_date, basic_salary


def get_owned_employee(db: Session, identity: Identity, employee_id: int) -> Employee:
    emp = (
        db.query(Employee)
        .filter(Employee.id == employee_id, Employee.owner_id == identity.user_id)
        .first()
    )
    if emp is None:
        raise NotFoundError("Employee not found")
    return emp


def list_employees(db: Session, identity: Identity) -> List[Employee]:
    return (
        db.query(Employee)
        .filter(Employee.owner_id == identity.user_id)
        .order_by(Employee.created_at.desc(), Employee.id.desc())
        .all()
    )


def list_employees_with_task_counts(db: Session, identity: Identity) -> List[Tuple[Employee, int]]:
    counts = (
        db.query(Task.assignee_id, func.count(Task.id).label("task_count"))
        .filter(Task.assignee_id.isnot(None))
        .group_by(Task.assignee_id)
        .subquery()
    )
    rows = (
        db.query(Employee, func.coalesce(counts.c.task_count, 0))
        .outerjoin(counts, counts.c.assignee_id == Employee.id)
        .filter(Employee.owner_id == identity.user_id)
        .order_by(Employee.created_at.desc(), Employee.id.desc())
        .all()
    )
    return [(emp, int(n)) for emp, n in rows]


def create_employee(db: Session, identity: Identity, *, name, joining_date, basic_salary) -> Employee:
    name, joining_date, basic_salary = _validated_fields(name, joining_date, basic_salary)

    for attempt in range(1, MAX_ALLOCATION_ATTEMPTS + 1):
        code = allocate(db, identity.user_id)
        emp = Employee(
            employee_code=code,
            name=name,
            joining_date=joining_date,
            basic_salary=basic_salary,
            owner_id=identity.user_id,
        )
        try:
            with db.begin_nested():
                db.add(emp)
                db.flush()
        except IntegrityError:
            logger.warning("Employee code %s taken for owner %s (attempt %d)", code, identity.user_id, attempt)
            continue

        db.commit()
        db.refresh(emp)
        logger.info("Created employee id=%s code=%s owner=%s", emp.id, emp.employee_code, identity.user_id)
        return emp

    db.rollback()
    raise UpstreamError(f"Could not allocate an employee code after {MAX_ALLOCATION_ATTEMPTS} attempts")


def update_employee(db: Session, identity: Identity, employee_id: int, *, name, joining_date, basic_salary) -> Employee:
    name, joining_date, basic_salary = _validated_fields(name, joining_date, basic_salary)
    emp = get_owned_employee(db, identity, employee_id)

    emp.name = name
    emp.joining_date = joining_date
    emp.basic_salary = basic_salary
    db.commit()
    db.refresh(emp)
    return emp


def delete_employee(db: Session, identity: Identity, employee_id: int) -> None:
    """Delete the employee and its salaries; tasks it was assigned to become unassigned."""
    emp = get_owned_employee(db, identity, employee_id)

    released = (
        db.query(Task)
        .filter(Task.assignee_id == emp.id)
        .update({Task.assignee_id: None}, synchronize_session="fetch")
    )
    db.delete(emp)
    db.commit()
    logger.info("Deleted employee id=%s owner=%s (unassigned %d tasks)", employee_id, identity.user_id, released)
