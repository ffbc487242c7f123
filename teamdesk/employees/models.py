# teamdesk/employees/models.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, DECIMAL, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from teamdesk.database import Base


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("owner_id", "employee_code", name="uq_employees_owner_code"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_code = Column(String(20), nullable=False)   # EMP001, EMP002, ...
    name = Column(String(100), nullable=False)
    joining_date = Column(Date, nullable=False)
    basic_salary = Column(DECIMAL(12, 2), nullable=False, default=0)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="employees")
    salaries = relationship("Salary", back_populates="employee", cascade="all, delete-orphan")
    tasks = relationship("Task", back_populates="assignee")

    def __repr__(self):
        return f"<Employee id={self.id} code={self.employee_code} name={self.name}>"
