# teamdesk/salary/ledger.py
"""
Monthly salary ledger keyed by (employee, month, year).

upsert_salaries() processes each record on its own: a bad record yields an
inline {"error": ...} entry and the rest of the batch is still saved.
"""
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from teamdesk.auth.dependencies import Identity
from teamdesk.employees.models import Employee
from teamdesk.errors import ValidationError
from teamdesk.salary.models import Salary

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# DECIMAL(12, 2) columns
MAX_AMOUNT = Decimal("9999999999.99")

Outcome = Union[Salary, Dict[str, Any]]


def _decimal(v, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """
    Money value rounded to cents. A missing value gives ``default``; a value
    that is present but not a finite amount the columns can hold raises ValueError.
    """
    if v is None:
        return default
    try:
        amount = Decimal(str(v)).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"not a money amount: {v!r}") from e
    if not amount.is_finite() or abs(amount) > MAX_AMOUNT:
        raise ValueError(f"money amount out of range: {v!r}")
    return amount


def _employee_key(v) -> Optional[int]:
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    if isinstance(v, str) and v.strip().isdigit():
        return int(v)
    return None


def compute_net_salary(basic_salary: Decimal, bonus: Decimal, deduction: Decimal) -> Decimal:
    return (basic_salary + bonus - deduction).quantize(CENTS, rounding=ROUND_HALF_UP)


def _validate_period(month, year, missing_message: str = "Month and year are required"):
    if not month or not year:
        raise ValidationError(missing_message)
    if not 1 <= int(month) <= 12 or int(year) <= 0:
        raise ValidationError("Invalid data format")


def _write_row(db: Session, employee: Employee, month: int, year: int, values: Dict[str, Decimal]) -> Salary:
    existing = db.query(Salary).filter_by(employee_id=employee.id, month=month, year=year).first()
    if existing:
        for field, value in values.items():
            setattr(existing, field, value)
        row = existing
    else:
        row = Salary(employee_id=employee.id, month=month, year=year, **values)
        db.add(row)
    db.flush()
    return row


def _upsert_one(db: Session, identity: Identity, month: int, year: int, record) -> Outcome:
    employee_id = record.employee_id
    key = _employee_key(employee_id)
    employee = None
    if key is not None:
        employee = (
            db.query(Employee)
            .filter(Employee.id == key, Employee.owner_id == identity.user_id)
            .first()
        )
    if employee is None:
        return {"error": f"Employee not found: {employee_id}"}

    try:
        basic_salary = _decimal(record.basic_salary, _decimal(employee.basic_salary, Decimal("0.00")))
        bonus = _decimal(record.bonus, Decimal("0.00"))
        deduction = _decimal(record.deduction, Decimal("0.00"))
        sent_net = _decimal(record.net_salary)
    except ValueError as e:
        logger.warning("Rejected salary for employee %s %s/%s: %s", employee_id, month, year, e)
        return {"error": f"Invalid salary values for employee: {employee_id}"}
    if basic_salary < 0 or bonus < 0 or deduction < 0:
        return {"error": f"Invalid salary values for employee: {employee_id}"}

    net_salary = compute_net_salary(basic_salary, bonus, deduction)
    if abs(net_salary) > MAX_AMOUNT:
        return {"error": f"Invalid salary values for employee: {employee_id}"}
    if sent_net is not None and sent_net != net_salary:
        logger.warning(
            "netSalary mismatch for employee %s %s/%s: client=%s server=%s (using server value)",
            employee_id, month, year, sent_net, net_salary,
        )

    values = {
        "basic_salary": basic_salary,
        "bonus": bonus,
        "deduction": deduction,
        "net_salary": net_salary,
    }

    # A concurrent request may insert the same (employee, month, year) between our
    # lookup and our insert; the unique key rejects it and the retry becomes an update.
    for attempt in (1, 2):
        try:
            with db.begin_nested():
                row = _write_row(db, employee, month, year, values)
            return row
        except IntegrityError:
            if attempt == 2:
                logger.exception("Salary upsert for employee %s %s/%s kept conflicting", employee_id, month, year)
                return {"error": f"Could not save salary for employee: {employee_id}"}
            logger.warning("Concurrent salary insert for employee %s %s/%s, retrying as update", employee_id, month, year)
        except SQLAlchemyError:
            logger.exception("Salary upsert failed for employee %s %s/%s", employee_id, month, year)
            return {"error": f"Could not save salary for employee: {employee_id}"}


def upsert_salaries(db: Session, identity: Identity, month, year, records: Optional[Iterable]) -> List[Outcome]:
    """Returns one outcome per record, in input order."""
    if records is None:
        raise ValidationError("Invalid data format")
    _validate_period(month, year, missing_message="Invalid data format")

    results = [_upsert_one(db, identity, month, year, record) for record in records]
    db.commit()

    saved = sum(1 for r in results if isinstance(r, Salary))
    logger.info("Salary batch %s/%s for owner %s: %d saved, %d failed", month, year, identity.user_id, saved, len(results) - saved)
    return results


def list_salaries(db: Session, identity: Identity, month, year, employee_id: Optional[int] = None) -> List[Salary]:
    _validate_period(month, year)
    q = (
        db.query(Salary)
        .join(Employee, Salary.employee_id == Employee.id)
        .options(selectinload(Salary.employee))
        .filter(Salary.month == month, Salary.year == year, Employee.owner_id == identity.user_id)
    )
    if employee_id is not None:
        q = q.filter(Salary.employee_id == employee_id)
    return q.order_by(Employee.employee_code, Salary.id).all()
