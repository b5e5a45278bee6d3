from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

EMPLOYEE_STATUSES = ('active', 'inactive', 'resigned', 'terminated')
EMPLOYMENT_TYPES = ('regular', 'probationary', 'contractual', 'part-time')


@dataclass
class Employee:
    """Employee data model"""
    employee_id: str
    employee_number: str
    first_name: str
    last_name: str
    department: str
    position: str
    basic_salary: Optional[Decimal]
    employment_type: str = 'regular'
    hire_date: Optional[date] = None
    status: str = 'active'
    sss_number: str = ''
    philhealth_number: str = ''
    pagibig_number: str = ''
    tin_number: str = ''

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == 'active'

    def __str__(self):
        return f"Employee({self.employee_id}, {self.name})"
