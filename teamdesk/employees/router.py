# teamdesk/employees/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.auth.dependencies import Identity, get_identity
from teamdesk.employees import service
from teamdesk.schemas.employee_schema import EmployeeSchema
from teamdesk.serializers import serialize_employee

# main.py mounts this under /api -> /api/employees/...
router = APIRouter(prefix="/employees", tags=["employees"])


# ----------------- Employee CRUD -----------------

@router.get("")
def list_employees(db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    employees = service.list_employees(db, identity)
    return {"employees": [serialize_employee(e) for e in employees]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeSchema,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    emp = service.create_employee(
        db,
        identity,
        name=body.name,
        joining_date=body.joining_date,
        basic_salary=body.basic_salary,
    )
    return {"message": "Employee created successfully", "employee": serialize_employee(emp)}


@router.get("/{employee_id}")
def get_employee(employee_id: int, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    emp = service.get_owned_employee(db, identity, employee_id)
    return {"employee": serialize_employee(emp)}


@router.patch("/{employee_id}")
def update_employee(
    employee_id: int,
    body: EmployeeSchema,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    emp = service.update_employee(
        db,
        identity,
        employee_id,
        name=body.name,
        joining_date=body.joining_date,
        basic_salary=body.basic_salary,
    )
    return {"message": "Employee updated successfully", "employee": serialize_employee(emp)}


@router.delete("/{employee_id}")
def delete_employee(employee_id: int, db: Session = Depends(get_db), identity: Identity = Depends(get_identity)):
    service.delete_employee(db, identity, employee_id)
    return {"message": "Employee deleted successfully"}
