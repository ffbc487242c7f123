# teamdesk/users/models.py
import json
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship

from teamdesk.database import Base

NOTIFICATION_FLAGS = ("emailNotifications", "taskUpdates", "projectUpdates", "weeklyReports")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    company_name = Column(String(150), nullable=False, default="")
    job_title = Column(String(100), nullable=False, default="")
    notification_settings = Column(Text, nullable=True)   # JSON string of NOTIFICATION_FLAGS
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    employees = relationship("Employee", back_populates="owner", cascade="all, delete-orphan")
    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")

    @property
    def notifications(self):
        defaults = {flag: True for flag in NOTIFICATION_FLAGS}
        if not self.notification_settings:
            return defaults
        try:
            stored = json.loads(self.notification_settings)
        except ValueError:
            return defaults
        defaults.update({k: bool(v) for k, v in stored.items() if k in defaults})
        return defaults

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"
