# teamdesk/salary/models.py
from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, DECIMAL, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from teamdesk.database import Base


class Salary(Base):
    __tablename__ = "salaries"
    __table_args__ = (
        UniqueConstraint("employee_id", "month", "year", name="uq_salaries_employee_month_year"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    month = Column(Integer, nullable=False)   # 1-12
    year = Column(Integer, nullable=False)
    basic_salary = Column(DECIMAL(12, 2), nullable=False, default=0)
    bonus = Column(DECIMAL(12, 2), nullable=False, default=0)
    deduction = Column(DECIMAL(12, 2), nullable=False, default=0)
    net_salary = Column(DECIMAL(12, 2), nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    employee = relationship("Employee", back_populates="salaries")

    def __repr__(self):
        return f"<Salary id={self.id} employee_id={self.employee_id} {self.year}-{self.month:02d}>"
