# teamdesk/salary/router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.auth.dependencies import Identity, get_identity
from teamdesk.salary import ledger
from teamdesk.salary.models import Salary
from teamdesk.schemas.salary_schema import SalaryBatchSchema
from teamdesk.serializers import serialize_salary

router = APIRouter(prefix="/salary", tags=["salary"])


@router.get("")
def list_salaries(
    month: int = Query(0),
    year: int = Query(0),
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    salaries = ledger.list_salaries(db, identity, month, year, employee_id=employee_id)
    return {"salaries": [serialize_salary(s, with_employee=True) for s in salaries]}


@router.post("")
def save_salaries(body: SalaryBatchSchema, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    outcomes = ledger.upsert_salaries(db, identity, body.month, body.year, body.salaries)
    return {
        "message": "Salary records saved successfully",
        "results": [serialize_salary(o) if isinstance(o, Salary) else o for o in outcomes],
    }
