# teamdesk/models.py
# Import every model once so relationship() strings resolve and create_all sees all tables.
from teamdesk.users.models import User
from teamdesk.employees.models import Employee
from teamdesk.projects.models import Project
from teamdesk.tasks.models import Task, TaskPriority, TaskStatus
from teamdesk.salary.models import Salary

__all__ = ["User", "Employee", "Project", "Task", "TaskPriority", "TaskStatus", "Salary"]
