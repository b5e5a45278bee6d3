import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# Add project root (config) and src to path
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / 'src'))

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from api.mock_hris import MockHRISAPI
from database.db import init_db
from database.repository import PayrollRepository
from models.employee import Employee
from models.payroll import PayrollPeriod


def make_employee(employee_id: str = "E100", basic_salary=Decimal('20000'), **overrides) -> Employee:
    """Employee with sensible defaults for tests"""
    fields = dict(
        employee_id=employee_id,
        employee_number=f"EMP-{employee_id}",
        first_name="Test",
        last_name=employee_id,
        department="Engineering",
        position="Developer",
        basic_salary=basic_salary,
        hire_date=date(2020, 1, 1),
    )
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    init_db(bind=engine)
    db = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def repo(session):
    return PayrollRepository(session)


@pytest.fixture
def seeded_repo(repo):
    """Repository holding the mock HRIS roster"""
    for employee in MockHRISAPI().get_all_employees():
        repo.save_employee(employee)
    return repo


@pytest.fixture
def draft_period(repo):
    return repo.add_period(PayrollPeriod.for_month(2026, 3))
