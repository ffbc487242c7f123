# teamdesk/schemas/auth_schema.py
from typing import Optional

from teamdesk.schemas.base import CamelModel


class RegisterSchema(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    company_name: Optional[str] = None
    job_title: Optional[str] = None


class LoginSchema(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdateSchema(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    company_name: Optional[str] = None
    job_title: Optional[str] = None


class NotificationSettingsSchema(CamelModel):
    email_notifications: bool = False
    task_updates: bool = False
    project_updates: bool = False
    weekly_reports: bool = False
