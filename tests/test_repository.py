from datetime import date
from decimal import Decimal

import pytest

from conftest import make_employee
from models.payroll import EarningsInputs, PayrollPeriod, PeriodTotals
from processors.payroll_builder import PayrollRecordBuilder
from utils.exceptions import InvalidInput, NotFound

D = Decimal


def test_save_and_get_employee(repo):
    saved = repo.save_employee(make_employee("E100", D('32500.50'), sss_number="33-1234567-8"))

    assert saved.basic_salary == D('32500.50')
    fetched = repo.get_employee("E100")
    assert fetched.name == "Test E100"
    assert fetched.sss_number == "33-1234567-8"
    assert fetched.hire_date == date(2020, 1, 1)


def test_save_employee_updates_existing(repo):
    repo.save_employee(make_employee("E100", D('20000')))
    repo.save_employee(make_employee("E100", D('21000'), position="Lead"))

    employees = repo.get_all_employees()
    assert len(employees) == 1
    assert employees[0].basic_salary == D('21000')
    assert employees[0].position == "Lead"


def test_get_missing_employee_returns_none(repo):
    assert repo.get_employee("NOPE") is None


@pytest.mark.parametrize("salary", [None, D('-1'), D('100.005')])
def test_save_employee_rejects_bad_salary(repo, salary):
    with pytest.raises(InvalidInput):
        repo.save_employee(make_employee(basic_salary=salary))
    assert repo.get_all_employees() == []


@pytest.mark.parametrize("field, value", [
    ("sss_number", "331234567-8"),
    ("philhealth_number", "12-3456789-2"),
    ("pagibig_number", "1234-5678"),
    ("tin_number", "123456789000"),
])
def test_save_employee_rejects_malformed_government_numbers(repo, field, value):
    with pytest.raises(InvalidInput, match=field):
        repo.save_employee(make_employee(**{field: value}))


def test_blank_government_numbers_allowed(repo):
    saved = repo.save_employee(make_employee())
    assert saved.tin_number == ''


def test_status_change_keeps_employee(repo):
    repo.save_employee(make_employee("E100"))
    repo.save_employee(make_employee("E200"))

    repo.set_employee_status("E100", "terminated")

    assert [e.employee_id for e in repo.get_active_employees()] == ["E200"]
    assert [e.employee_id for e in repo.get_all_employees()] == ["E100", "E200"]


def test_status_change_errors(repo):
    repo.save_employee(make_employee("E100"))
    with pytest.raises(InvalidInput):
        repo.set_employee_status("E100", "on-vacation")
    with pytest.raises(NotFound):
        repo.set_employee_status("E999", "inactive")


def test_period_for_month():
    period = PayrollPeriod.for_month(2024, 2)

    assert period.period_id == "PP-2024-02"
    assert period.label == "February 2024"
    assert period.start_date == date(2024, 2, 1)
    assert period.end_date == period.pay_date == date(2024, 2, 29)
    assert period.status == 'draft'
    assert period.totals == PeriodTotals()


def test_add_period_rejects_duplicates(repo, draft_period):
    with pytest.raises(InvalidInput):
        repo.add_period(PayrollPeriod.for_month(2026, 3))


def test_get_period_not_found(repo):
    with pytest.raises(NotFound):
        repo.get_period("PP-2000-01")


def test_periods_newest_first(repo):
    for month in (1, 3, 2):
        repo.add_period(PayrollPeriod.for_month(2026, month))

    assert [p.period_id for p in repo.get_periods()] == ["PP-2026-03", "PP-2026-02", "PP-2026-01"]


def test_latest_completed_period(repo):
    for month in (1, 2, 3):
        repo.add_period(PayrollPeriod.for_month(2026, month))
    assert repo.get_latest_completed_period() is None

    with repo.atomic():
        repo.update_period("PP-2026-01", PeriodTotals(), 'completed', date(2026, 1, 31))
        repo.update_period("PP-2026-02", PeriodTotals(), 'completed', date(2026, 2, 28))

    assert repo.get_latest_completed_period().period_id == "PP-2026-02"


def test_status_moves_forward_only(repo, draft_period):
    with repo.atomic():
        repo.update_period(draft_period.period_id, PeriodTotals(), 'processing', None)
        repo.update_period(draft_period.period_id, PeriodTotals(), 'completed', date(2026, 3, 31))

    with pytest.raises(InvalidInput):
        with repo.atomic():
            repo.update_period(draft_period.period_id, PeriodTotals(), 'draft', None)

    assert repo.get_period(draft_period.period_id).status == 'completed'


def test_cancelled_period_is_terminal(repo, draft_period):
    with repo.atomic():
        repo.update_period(draft_period.period_id, PeriodTotals(), 'cancelled', None)

    with pytest.raises(InvalidInput):
        repo.update_period(draft_period.period_id, PeriodTotals(), 'completed', date(2026, 3, 31))


def test_unknown_period_status(repo, draft_period):
    with pytest.raises(InvalidInput):
        repo.update_period(draft_period.period_id, PeriodTotals(), 'paid', None)


def test_replace_period_records(repo, draft_period):
    builder = PayrollRecordBuilder()
    first = [builder.build(make_employee(eid), EarningsInputs(), draft_period.period_id) for eid in ("E1", "E2")]
    second = [builder.build(make_employee("E2", D('30000')), EarningsInputs(), draft_period.period_id)]

    with repo.atomic():
        repo.replace_period_records(draft_period.period_id, first)
    assert [r.employee_id for r in repo.get_period_records(draft_period.period_id)] == ["E1", "E2"]

    with repo.atomic():
        repo.replace_period_records(draft_period.period_id, second)
    stored = repo.get_period_records(draft_period.period_id)
    assert stored == second
    assert repo.get_employee_records("E2") == second


def test_replace_rejects_records_of_another_period(repo, draft_period):
    record = PayrollRecordBuilder().build(make_employee(), EarningsInputs(), "PP-2026-04")

    with pytest.raises(InvalidInput):
        repo.replace_period_records(draft_period.period_id, [record])


def test_replace_unknown_period(repo):
    with pytest.raises(NotFound):
        repo.replace_period_records("PP-2000-01", [])


def test_atomic_rolls_back_on_error(repo, draft_period):
    record = PayrollRecordBuilder().build(make_employee(), EarningsInputs(), draft_period.period_id)

    with pytest.raises(RuntimeError):
        with repo.atomic():
            repo.replace_period_records(draft_period.period_id, [record])
            raise RuntimeError("boom")

    assert repo.get_period_records(draft_period.period_id) == []
