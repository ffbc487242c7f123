# teamdesk/serializers.py
# ORM row -> flat camelCase dict for JSON responses
from decimal import Decimal
from typing import Any, Dict, Optional


def _iso_safe(v) -> Optional[str]:
    return v.isoformat() if v is not None else None


def _money(v) -> float:
    if v is None:
        return 0.0
    return float(Decimal(v))


def _enum_value(v):
    return getattr(v, "value", v)


def serialize_user(user) -> Dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "companyName": user.company_name or "",
        "jobTitle": user.job_title or "",
        "notificationSettings": user.notifications,
        "createdAt": _iso_safe(user.created_at),
    }


def serialize_employee(emp, task_count: Optional[int] = None) -> Dict[str, Any]:
    out = {
        "id": emp.id,
        "employeeId": emp.employee_code,
        "name": emp.name,
        "joiningDate": _iso_safe(emp.joining_date),
        "basicSalary": _money(emp.basic_salary),
        "userId": emp.owner_id,
        "createdAt": _iso_safe(emp.created_at),
        "updatedAt": _iso_safe(emp.updated_at),
    }
    if task_count is not None:
        out["taskCount"] = task_count
    return out


def _serialize_employee_short(emp) -> Optional[Dict[str, Any]]:
    if emp is None:
        return None
    return {"id": emp.id, "employeeId": emp.employee_code, "name": emp.name}


def serialize_task(task, with_project: bool = False) -> Dict[str, Any]:
    out = {
        "id": task.id,
        "title": task.title,
        "description": task.description or "",
        "priority": _enum_value(task.priority),
        "status": _enum_value(task.status),
        "projectId": task.project_id,
        "assigneeId": task.assignee_id,
        "assignee": serialize_employee(task.assignee) if task.assignee is not None else None,
        "createdAt": _iso_safe(task.created_at),
        "updatedAt": _iso_safe(task.updated_at),
    }
    if with_project:
        out["project"] = {"id": task.project.id, "name": task.project.name}
    return out


def serialize_project(project, task_count: Optional[int] = None, tasks=None) -> Dict[str, Any]:
    out = {
        "id": project.id,
        "name": project.name,
        "description": project.description or "",
        "userId": project.owner_id,
        "createdAt": _iso_safe(project.created_at),
        "updatedAt": _iso_safe(project.updated_at),
    }
    if task_count is not None:
        out["taskCount"] = task_count
    if tasks is not None:
        out["tasks"] = [serialize_task(t) for t in tasks]
    return out


def serialize_salary(salary, with_employee: bool = False) -> Dict[str, Any]:
    out = {
        "id": salary.id,
        "month": salary.month,
        "year": salary.year,
        "employeeId": salary.employee_id,
        "basicSalary": _money(salary.basic_salary),
        "bonus": _money(salary.bonus),
        "deduction": _money(salary.deduction),
        "netSalary": _money(salary.net_salary),
        "createdAt": _iso_safe(salary.created_at),
        "updatedAt": _iso_safe(salary.updated_at),
    }
    if with_employee:
        out["employee"] = _serialize_employee_short(salary.employee)
    return out
