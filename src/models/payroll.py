import calendar
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional
from utils.formatters import round_peso, format_period_label

ZERO = Decimal('0')

# Forward-only ordering; 'cancelled' is terminal and sits outside it
PERIOD_STATUSES = ('draft', 'processing', 'completed', 'cancelled')
PERIOD_STATUS_ORDER = {'draft': 0, 'processing': 1, 'completed': 2}


@dataclass(frozen=True)
class Contributions:
    """Statutory deductions computed from a monthly basic salary"""
    sss: Decimal
    philhealth: Decimal
    pagibig: Decimal
    tax: Decimal

    @property
    def total(self) -> Decimal:
        return self.sss + self.philhealth + self.pagibig + self.tax

    def rounded(self) -> 'Contributions':
        """Each deduction rounded to a whole peso"""
        return Contributions(
            sss=round_peso(self.sss),
            philhealth=round_peso(self.philhealth),
            pagibig=round_peso(self.pagibig),
            tax=round_peso(self.tax)
        )


@dataclass(frozen=True)
class EarningsInputs:
    """Supplementary earnings on top of basic salary"""
    overtime: Decimal = ZERO
    holiday: Decimal = ZERO
    allowances: Decimal = ZERO


@dataclass
class PayrollRecord:
    """One employee's computed pay for one period"""
    record_id: str
    period_id: str
    employee_id: str
    employee_name: str
    department: str
    position: str
    basic_salary: Decimal
    overtime: Decimal
    holiday: Decimal
    allowances: Decimal
    gross_pay: Decimal
    sss: Decimal
    philhealth: Decimal
    pagibig: Decimal
    tax: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    @staticmethod
    def make_id(period_id: str, employee_id: str) -> str:
        return f"{period_id}:{employee_id}"


@dataclass(frozen=True)
class PeriodTotals:
    """Aggregate figures for a payroll period"""
    total_employees: int = 0
    gross_pay: Decimal = ZERO
    deductions: Decimal = ZERO
    net_pay: Decimal = ZERO
    overtime: Decimal = ZERO
    allowances: Decimal = ZERO

    @classmethod
    def from_records(cls, records: List[PayrollRecord]) -> 'PeriodTotals':
        return cls(
            total_employees=len(records),
            gross_pay=sum((r.gross_pay for r in records), ZERO),
            deductions=sum((r.total_deductions for r in records), ZERO),
            net_pay=sum((r.net_pay for r in records), ZERO),
            overtime=sum((r.overtime for r in records), ZERO),
            allowances=sum((r.allowances for r in records), ZERO)
        )


@dataclass
class PayrollPeriod:
    """One payroll cycle"""
    period_id: str
    label: str
    start_date: date
    end_date: date
    pay_date: date
    status: str = 'draft'
    totals: PeriodTotals = field(default_factory=PeriodTotals)
    processed_date: Optional[date] = None

    @classmethod
    def for_month(cls, year: int, month: int) -> 'PayrollPeriod':
        """Draft period covering a calendar month, paid on its last day"""
        last_day = calendar.monthrange(year, month)[1]
        start = date(year, month, 1)
        end = date(year, month, last_day)
        return cls(
            period_id=f"PP-{year}-{month:02d}",
            label=format_period_label(start),
            start_date=start,
            end_date=end,
            pay_date=end
        )
