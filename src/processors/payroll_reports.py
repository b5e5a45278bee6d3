from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List
from models.payroll import PayrollPeriod, PayrollRecord

ZERO = Decimal('0')

# Presentation split of each agency total into employee and employer parts
CONTRIBUTION_SHARES = (
    ('SSS', 'sss', Decimal('0.45'), Decimal('0.55')),
    ('PhilHealth', 'philhealth', Decimal('0.5'), Decimal('0.5')),
    ('Pag-IBIG', 'pagibig', Decimal('0.5'), Decimal('0.5')),
)


@dataclass(frozen=True)
class ContributionLine:
    name: str
    employee: Decimal
    employer: Decimal
    total: Decimal


@dataclass
class DepartmentTotals:
    department: str
    headcount: int = 0
    gross_pay: Decimal = ZERO
    deductions: Decimal = ZERO
    net_pay: Decimal = ZERO


def contribution_breakdown(records: List[PayrollRecord]) -> List[ContributionLine]:
    """
    Agency totals for a set of records, split into employee and employer shares.

    Reporting only: net pay is always computed from the full recorded deduction.
    """
    lines = []
    for name, attr, employee_share, employer_share in CONTRIBUTION_SHARES:
        total = sum((getattr(r, attr) for r in records), ZERO)
        lines.append(ContributionLine(
            name=name,
            employee=total * employee_share,
            employer=total * employer_share,
            total=total
        ))
    return lines


def monthly_payroll_total(periods: List[PayrollPeriod], records: List[PayrollRecord]) -> Decimal:
    """Net pay of the latest completed period, or of all records when none is completed"""
    completed = [p for p in periods if p.status == 'completed']
    if completed:
        latest = max(completed, key=lambda p: p.start_date)
        return latest.totals.net_pay
    return sum((r.net_pay for r in records), ZERO)


def department_totals(records: List[PayrollRecord]) -> List[DepartmentTotals]:
    """Headcount and pay per department, sorted by department name"""
    by_department: Dict[str, DepartmentTotals] = {}
    for record in records:
        totals = by_department.setdefault(record.department, DepartmentTotals(record.department))
        totals.headcount += 1
        totals.gross_pay += record.gross_pay
        totals.deductions += record.total_deductions
        totals.net_pay += record.net_pay
    return [by_department[name] for name in sorted(by_department)]
