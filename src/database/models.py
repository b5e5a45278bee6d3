from sqlalchemy import Column, Integer, String, Date, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from .db import Base


class EmployeeDB(Base):
    """Employee database model"""
    __tablename__ = "employees"

    id = Column(String, primary_key=True)
    employee_number = Column(String(20), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    department = Column(String(100), nullable=False, default='')
    position = Column(String(100), nullable=False, default='')
    employment_type = Column(String(20), default='regular')
    hire_date = Column(Date)
    basic_salary = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, default='active', index=True)  # 'active', 'inactive', 'resigned', 'terminated'

    # Government numbers
    sss_number = Column(String(20), default='')
    philhealth_number = Column(String(20), default='')
    pagibig_number = Column(String(20), default='')
    tin_number = Column(String(20), default='')

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    payroll_records = relationship("PayrollRecordDB", back_populates="employee")

    def __repr__(self):
        return f"<Employee(id={self.id}, name={self.first_name} {self.last_name}, status={self.status})>"


class PayrollPeriodDB(Base):
    """Payroll period database model"""
    __tablename__ = "payroll_periods"

    id = Column(String, primary_key=True)
    label = Column(String(50), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    pay_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default='draft')  # 'draft', 'processing', 'completed', 'cancelled'

    # Aggregate totals
    total_employees = Column(Integer, nullable=False, default=0)
    gross_pay = Column(Numeric(14, 2), nullable=False, default=0)
    deductions = Column(Numeric(14, 2), nullable=False, default=0)
    net_pay = Column(Numeric(14, 2), nullable=False, default=0)
    overtime = Column(Numeric(14, 2), nullable=False, default=0)
    allowances = Column(Numeric(14, 2), nullable=False, default=0)

    processed_date = Column(Date)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    records = relationship("PayrollRecordDB", back_populates="period", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<PayrollPeriod(id={self.id}, label={self.label}, status={self.status})>"


class PayrollRecordDB(Base):
    """Payroll record database model"""
    __tablename__ = "payroll_records"
    __table_args__ = (
        UniqueConstraint('period_id', 'employee_id', name='uq_payroll_record_period_employee'),
    )

    id = Column(String, primary_key=True)
    period_id = Column(String, ForeignKey('payroll_periods.id'), nullable=False, index=True)
    employee_id = Column(String, ForeignKey('employees.id'), nullable=False)

    # Employee snapshot at run time
    employee_name = Column(String(200), nullable=False)
    department = Column(String(100), nullable=False, default='')
    position = Column(String(100), nullable=False, default='')

    # Earnings
    basic_salary = Column(Numeric(12, 2), nullable=False)
    overtime = Column(Numeric(12, 2), nullable=False, default=0)
    holiday = Column(Numeric(12, 2), nullable=False, default=0)
    allowances = Column(Numeric(12, 2), nullable=False, default=0)
    gross_pay = Column(Numeric(12, 2), nullable=False)

    # Deductions
    sss = Column(Numeric(12, 2), nullable=False, default=0)
    philhealth = Column(Numeric(12, 2), nullable=False, default=0)
    pagibig = Column(Numeric(12, 2), nullable=False, default=0)
    tax = Column(Numeric(12, 2), nullable=False, default=0)
    total_deductions = Column(Numeric(12, 2), nullable=False)

    net_pay = Column(Numeric(12, 2), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    period = relationship("PayrollPeriodDB", back_populates="records")
    employee = relationship("EmployeeDB", back_populates="payroll_records")

    def __repr__(self):
        return f"<PayrollRecord(id={self.id}, employee={self.employee_id}, net={self.net_pay})>"
