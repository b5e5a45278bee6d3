import logging
from contextlib import contextmanager
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from .models import EmployeeDB, PayrollPeriodDB, PayrollRecordDB
from models.employee import Employee, EMPLOYEE_STATUSES
from models.payroll import (
    PayrollPeriod, PayrollRecord, PeriodTotals,
    PERIOD_STATUSES, PERIOD_STATUS_ORDER
)
from utils.exceptions import InvalidInput, NotFound
from utils.validators import validate_amount, validate_government_numbers, CENTAVO_PLACES

logger = logging.getLogger(__name__)


class PayrollRepository:
    """Repository for payroll data operations"""

    def __init__(self, db_session: Session):
        self.db = db_session

    @contextmanager
    def atomic(self):
        """Commit everything done inside the block, or roll all of it back"""
        try:
            yield self
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # ========== Employee Operations ==========

    def save_employee(self, employee: Employee) -> Employee:
        """Save or update employee"""
        salary = validate_amount(employee.basic_salary, f"basic salary of {employee.employee_id}", CENTAVO_PLACES)
        validate_government_numbers(employee)
        if employee.status not in EMPLOYEE_STATUSES:
            raise InvalidInput(f"Unknown employee status {employee.status!r}")

        db_employee = self.db.query(EmployeeDB).filter_by(id=employee.employee_id).first()
        if not db_employee:
            db_employee = EmployeeDB(id=employee.employee_id)
            self.db.add(db_employee)

        db_employee.employee_number = employee.employee_number
        db_employee.first_name = employee.first_name
        db_employee.last_name = employee.last_name
        db_employee.department = employee.department
        db_employee.position = employee.position
        db_employee.employment_type = employee.employment_type
        db_employee.hire_date = employee.hire_date
        db_employee.basic_salary = salary
        db_employee.status = employee.status
        db_employee.sss_number = employee.sss_number
        db_employee.philhealth_number = employee.philhealth_number
        db_employee.pagibig_number = employee.pagibig_number
        db_employee.tin_number = employee.tin_number

        self.db.commit()
        self.db.refresh(db_employee)
        return self._to_employee(db_employee)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Get employee by ID"""
        db_employee = self.db.query(EmployeeDB).filter_by(id=employee_id).first()
        return self._to_employee(db_employee) if db_employee else None

    def get_all_employees(self) -> List[Employee]:
        """Get all employees, whatever their status"""
        rows = self.db.query(EmployeeDB).order_by(EmployeeDB.id).all()
        return [self._to_employee(row) for row in rows]

    def get_active_employees(self) -> List[Employee]:
        """Get employees eligible for a payroll run"""
        rows = self.db.query(EmployeeDB).filter_by(status='active').order_by(EmployeeDB.id).all()
        return [self._to_employee(row) for row in rows]

    def set_employee_status(self, employee_id: str, status: str) -> Employee:
        """Change employment status; the record itself is kept"""
        if status not in EMPLOYEE_STATUSES:
            raise InvalidInput(f"Unknown employee status {status!r}")
        db_employee = self.db.query(EmployeeDB).filter_by(id=employee_id).first()
        if not db_employee:
            raise NotFound(f"Employee {employee_id} not found")
        db_employee.status = status
        self.db.commit()
        self.db.refresh(db_employee)
        return self._to_employee(db_employee)

    # ========== Payroll Period Operations ==========

    def add_period(self, period: PayrollPeriod) -> PayrollPeriod:
        """Create a new payroll period"""
        if period.status not in PERIOD_STATUSES:
            raise InvalidInput(f"Unknown period status {period.status!r}")
        if self.db.query(PayrollPeriodDB).filter_by(id=period.period_id).first():
            raise InvalidInput(f"Payroll period {period.period_id} already exists")

        db_period = PayrollPeriodDB(
            id=period.period_id,
            label=period.label,
            start_date=period.start_date,
            end_date=period.end_date,
            pay_date=period.pay_date,
            status=period.status,
            processed_date=period.processed_date
        )
        self._apply_totals(db_period, period.totals)
        self.db.add(db_period)
        self.db.commit()
        self.db.refresh(db_period)
        return self._to_period(db_period)

    def get_period(self, period_id: str) -> PayrollPeriod:
        """Get payroll period, raising NotFound when absent"""
        return self._to_period(self._get_period_row(period_id))

    def get_periods(self) -> List[PayrollPeriod]:
        """Get all periods, newest first"""
        rows = self.db.query(PayrollPeriodDB).order_by(PayrollPeriodDB.start_date.desc()).all()
        return [self._to_period(row) for row in rows]

    def get_latest_completed_period(self) -> Optional[PayrollPeriod]:
        row = self.db.query(PayrollPeriodDB).filter_by(status='completed').order_by(
            PayrollPeriodDB.start_date.desc()
        ).first()
        return self._to_period(row) if row else None

    def update_period(self, period_id: str, totals: PeriodTotals, status: str,
                      processed_date: Optional[date]) -> PayrollPeriod:
        """
        Store a period's totals and status.

        Only flushes; run inside atomic() together with replace_period_records.
        Status may only move forward (draft -> processing -> completed) and a
        cancelled period cannot be changed.
        """
        if status not in PERIOD_STATUSES:
            raise InvalidInput(f"Unknown period status {status!r}")

        db_period = self._get_period_row(period_id)
        if db_period.status == 'cancelled':
            raise InvalidInput(f"Payroll period {period_id} is cancelled")
        if status != 'cancelled' and PERIOD_STATUS_ORDER[status] < PERIOD_STATUS_ORDER[db_period.status]:
            raise InvalidInput(f"Payroll period {period_id} cannot move from {db_period.status} back to {status}")

        db_period.status = status
        db_period.processed_date = processed_date
        self._apply_totals(db_period, totals)
        self.db.flush()
        return self._to_period(db_period)

    # ========== Payroll Record Operations ==========

    def get_period_records(self, period_id: str) -> List[PayrollRecord]:
        """Get all payroll records of a period"""
        rows = self.db.query(PayrollRecordDB).filter_by(period_id=period_id).order_by(
            PayrollRecordDB.employee_id
        ).all()
        return [self._to_record(row) for row in rows]

    def get_employee_records(self, employee_id: str) -> List[PayrollRecord]:
        """Get payroll history of one employee"""
        rows = self.db.query(PayrollRecordDB).filter_by(employee_id=employee_id).order_by(
            PayrollRecordDB.period_id
        ).all()
        return [self._to_record(row) for row in rows]

    def replace_period_records(self, period_id: str, records: List[PayrollRecord]) -> None:
        """
        Replace every record of a period with a new set.

        Only flushes; run inside atomic() so readers never see a mix of old
        and new records.
        """
        self._get_period_row(period_id)
        stray = [r.record_id for r in records if r.period_id != period_id]
        if stray:
            raise InvalidInput(f"Records {stray} do not belong to period {period_id}")

        existing = self.db.query(PayrollRecordDB).filter_by(period_id=period_id).all()
        for row in existing:
            self.db.delete(row)
        self.db.flush()

        self.db.add_all([self._to_record_db(record) for record in records])
        self.db.flush()
        logger.debug("Replaced %d records with %d for period %s", len(existing), len(records), period_id)

    # ========== Helper Methods ==========

    def _get_period_row(self, period_id: str) -> PayrollPeriodDB:
        db_period = self.db.query(PayrollPeriodDB).filter_by(id=period_id).first()
        if not db_period:
            raise NotFound(f"Payroll period {period_id} not found")
        return db_period

    def _apply_totals(self, db_period: PayrollPeriodDB, totals: PeriodTotals):
        db_period.total_employees = totals.total_employees
        db_period.gross_pay = totals.gross_pay
        db_period.deductions = totals.deductions
        db_period.net_pay = totals.net_pay
        db_period.overtime = totals.overtime
        db_period.allowances = totals.allowances

    def _to_employee(self, row: EmployeeDB) -> Employee:
        return Employee(
            employee_id=row.id,
            employee_number=row.employee_number,
            first_name=row.first_name,
            last_name=row.last_name,
            department=row.department,
            position=row.position,
            basic_salary=row.basic_salary,
            employment_type=row.employment_type,
            hire_date=row.hire_date,
            status=row.status,
            sss_number=row.sss_number or '',
            philhealth_number=row.philhealth_number or '',
            pagibig_number=row.pagibig_number or '',
            tin_number=row.tin_number or ''
        )

    def _to_period(self, row: PayrollPeriodDB) -> PayrollPeriod:
        return PayrollPeriod(
            period_id=row.id,
            label=row.label,
            start_date=row.start_date,
            end_date=row.end_date,
            pay_date=row.pay_date,
            status=row.status,
            totals=PeriodTotals(
                total_employees=row.total_employees,
                gross_pay=row.gross_pay,
                deductions=row.deductions,
                net_pay=row.net_pay,
                overtime=row.overtime,
                allowances=row.allowances
            ),
            processed_date=row.processed_date
        )

    def _to_record(self, row: PayrollRecordDB) -> PayrollRecord:
        return PayrollRecord(
            record_id=row.id,
            period_id=row.period_id,
            employee_id=row.employee_id,
            employee_name=row.employee_name,
            department=row.department,
            position=row.position,
            basic_salary=row.basic_salary,
            overtime=row.overtime,
            holiday=row.holiday,
            allowances=row.allowances,
            gross_pay=row.gross_pay,
            sss=row.sss,
            philhealth=row.philhealth,
            pagibig=row.pagibig,
            tax=row.tax,
            total_deductions=row.total_deductions,
            net_pay=row.net_pay
        )

    def _to_record_db(self, record: PayrollRecord) -> PayrollRecordDB:
        return PayrollRecordDB(
            id=record.record_id,
            period_id=record.period_id,
            employee_id=record.employee_id,
            employee_name=record.employee_name,
            department=record.department,
            position=record.position,
            basic_salary=record.basic_salary,
            overtime=record.overtime,
            holiday=record.holiday,
            allowances=record.allowances,
            gross_pay=record.gross_pay,
            sss=record.sss,
            philhealth=record.philhealth,
            pagibig=record.pagibig,
            tax=record.tax,
            total_deductions=record.total_deductions,
            net_pay=record.net_pay
        )
