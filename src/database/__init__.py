from .db import engine, SessionLocal, Base, init_db
from .models import (
    EmployeeDB,
    PayrollPeriodDB,
    PayrollRecordDB
)
from .repository import PayrollRepository

__all__ = [
    'engine',
    'SessionLocal',
    'Base',
    'init_db',
    'EmployeeDB',
    'PayrollPeriodDB',
    'PayrollRecordDB',
    'PayrollRepository'
]
