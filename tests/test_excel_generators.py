from decimal import Decimal
from pathlib import Path

import openpyxl

from conftest import make_employee
from models.payroll import EarningsInputs, PayrollPeriod, PeriodTotals
from processors.payroll_builder import PayrollRecordBuilder
from processors.payroll_register_generator import PayrollRegisterGenerator, REGISTER_COLUMNS
from processors.payslip_generator import PayslipGenerator

D = Decimal


def completed_period(records):
    period = PayrollPeriod.for_month(2026, 3)
    period.status = 'completed'
    period.totals = PeriodTotals.from_records(records)
    return period


def test_payslip(tmp_path):
    employee = make_employee("E100", D('45000'), first_name="Maria", last_name="Santos")
    record = PayrollRecordBuilder().build(employee, EarningsInputs(overtime=D('3600')), "PP-2026-03")
    period = completed_period([record])

    path = PayslipGenerator(output_dir=tmp_path).generate(record, period)

    assert Path(path) == tmp_path / "E100_PP-2026-03_payslip.xlsx"
    ws = openpyxl.load_workbook(path)["Payslip"]
    assert ws['A1'].value == "PAYSLIP"
    assert ws['B2'].value == "March 2026"
    assert ws['B5'].value == "Maria Santos"
    assert ws['D5'].value == "E100"
    assert ws['A8'].value == "Earnings"
    assert ws['C8'].value == "Deductions"
    # Basic salary and overtime only; zero holiday pay and allowances are left out
    assert [ws['A9'].value, ws['A10'].value, ws['A11'].value] == ["Basic salary", "Overtime", None]
    assert ws['B10'].value == 3600
    assert [ws[f'C{r}'].value for r in range(9, 13)] == ["SSS", "PhilHealth", "Pag-IBIG", "Withholding tax"]
    assert ws['D12'].value == float(record.tax)
    assert ws['A13'].value == "Gross pay"
    assert ws['B13'].value == 48600
    assert ws['D13'].value == float(record.total_deductions)
    assert ws['A15'].value == "NET PAY"
    assert ws['B15'].value == f"₱{record.net_pay:,.2f}"


def test_register(tmp_path):
    builder = PayrollRecordBuilder()
    records = [
        builder.build(make_employee(eid, salary), EarningsInputs(), "PP-2026-03")
        for eid, salary in [("E2", D('45000')), ("E1", D('20000'))]
    ]
    period = completed_period(records)

    path = PayrollRegisterGenerator(output_dir=tmp_path).generate(period, records)

    assert Path(path) == tmp_path / "payroll_register_PP-2026-03.xlsx"
    ws = openpyxl.load_workbook(path)["PP-2026-03"]
    assert [ws.cell(row=4, column=c).value for c in range(1, len(REGISTER_COLUMNS) + 1)] == \
        [header for header, _, _ in REGISTER_COLUMNS]
    # Sorted by employee id
    assert ws['A5'].value == "E1"
    assert ws['A6'].value == "E2"
    assert ws['O5'].value == 18500

    assert ws['A7'].value == "TOTAL"
    assert ws['B7'].value == 2
    assert ws['O7'].value == float(period.totals.net_pay)
    assert ws['N7'].value == float(period.totals.deductions)

    assert ws['A9'].value == "Employees"
    assert ws['B9'].value == 2
    assert ws['A13'].value == "Status"
    assert ws['B13'].value == "completed"

    assert ws['A15'].value == "Contribution"
    assert [ws[f'A{r}'].value for r in range(16, 19)] == ["SSS", "PhilHealth", "Pag-IBIG"]
    assert ws['B16'].value == 810
    assert ws['C16'].value == 990
    assert ws['D16'].value == 1800


def test_register_empty_period(tmp_path):
    period = completed_period([])

    path = PayrollRegisterGenerator(output_dir=tmp_path).generate(period, [])

    ws = openpyxl.load_workbook(path).active
    assert ws['A5'].value == "TOTAL"
    assert ws['B5'].value == 0
    assert ws['O5'].value == 0
