from datetime import date
from decimal import Decimal

from conftest import make_employee
from models.payroll import EarningsInputs, PayrollPeriod, PeriodTotals
from processors.payroll_builder import PayrollRecordBuilder
from processors.payroll_reports import contribution_breakdown, department_totals, monthly_payroll_total
from utils.formatters import format_currency, round_peso

D = Decimal


def build_records():
    builder = PayrollRecordBuilder()
    employees = [
        make_employee("E1", D('20000'), department="Engineering"),
        make_employee("E2", D('45000'), department="Finance"),
        make_employee("E3", D('65000'), department="Engineering"),
    ]
    return [builder.build(e, EarningsInputs(), "PP-2026-03") for e in employees]


def test_contribution_breakdown_shares():
    records = build_records()
    lines = {line.name: line for line in contribution_breakdown(records)}

    assert list(lines) == ['SSS', 'PhilHealth', 'Pag-IBIG']
    sss = lines['SSS']
    assert sss.total == D('2700')
    assert sss.employee == D('1215')
    assert sss.employer == D('1485')

    philhealth = lines['PhilHealth']
    # 500 + 1125 + 1625
    assert philhealth.total == D('3250')
    assert philhealth.employee == philhealth.employer == D('1625')

    pagibig = lines['Pag-IBIG']
    assert pagibig.total == D('300')
    assert pagibig.employee + pagibig.employer == pagibig.total


def test_contribution_breakdown_empty():
    assert all(line.total == 0 for line in contribution_breakdown([]))


def test_monthly_total_uses_latest_completed_period():
    records = build_records()
    jan = PayrollPeriod.for_month(2026, 1)
    jan.status = 'completed'
    jan.totals = PeriodTotals(total_employees=2, net_pay=D('1000'))
    feb = PayrollPeriod.for_month(2026, 2)
    feb.status = 'completed'
    feb.totals = PeriodTotals(total_employees=2, net_pay=D('2000'))
    mar = PayrollPeriod.for_month(2026, 3)

    assert monthly_payroll_total([jan, mar, feb], records) == D('2000')


def test_monthly_total_falls_back_to_records():
    records = build_records()
    drafts = [PayrollPeriod.for_month(2026, 3)]

    assert monthly_payroll_total(drafts, records) == sum(r.net_pay for r in records)
    assert monthly_payroll_total([], []) == 0


def test_department_totals():
    records = build_records()
    departments = department_totals(records)

    assert [d.department for d in departments] == ["Engineering", "Finance"]
    engineering = departments[0]
    assert engineering.headcount == 2
    assert engineering.gross_pay == D('85000')
    assert engineering.net_pay == engineering.gross_pay - engineering.deductions
    assert sum(d.net_pay for d in departments) == sum(r.net_pay for r in records)


def test_format_currency():
    assert format_currency(D('1234')) == "₱1,234.00"
    assert format_currency(D('-85'), "PHP ") == "-PHP 85.00"


def test_round_peso_half_up():
    assert round_peso(D('0.5')) == D('1')
    assert round_peso(D('1137.49')) == D('1137')
    assert round_peso(D('2.5')) == D('3')
