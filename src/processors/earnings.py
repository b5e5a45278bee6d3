from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Optional
from models.employee import Employee
from models.payroll import EarningsInputs
from utils.formatters import round_peso
from utils.validators import validate_amount
from config.settings import OVERTIME_RATE, ALLOWANCE_RATE, HOLIDAY_RATE


class EarningsSource(ABC):
    """Supplies overtime, holiday pay and allowances for an employee"""

    @abstractmethod
    def get_earnings(self, employee: Employee) -> EarningsInputs:
        raise NotImplementedError


class PercentageEarningsSource(EarningsSource):
    """
    Placeholder policy: earnings as fixed fractions of basic salary,
    each rounded to a whole peso. Stands in until attendance data is wired in.
    """

    def __init__(self, overtime_rate: Decimal = OVERTIME_RATE,
                 allowance_rate: Decimal = ALLOWANCE_RATE,
                 holiday_rate: Decimal = HOLIDAY_RATE):
        self.overtime_rate = validate_amount(overtime_rate, "overtime rate")
        self.allowance_rate = validate_amount(allowance_rate, "allowance rate")
        self.holiday_rate = validate_amount(holiday_rate, "holiday rate")

    def get_earnings(self, employee: Employee) -> EarningsInputs:
        basic = validate_amount(employee.basic_salary, f"basic salary of {employee.employee_id}")
        return EarningsInputs(
            overtime=round_peso(basic * self.overtime_rate),
            holiday=round_peso(basic * self.holiday_rate),
            allowances=round_peso(basic * self.allowance_rate)
        )


class FixedEarningsSource(EarningsSource):
    """Earnings supplied per employee from outside, e.g. derived from timesheets"""

    def __init__(self, earnings_by_employee: Optional[Dict[str, EarningsInputs]] = None):
        self.earnings_by_employee = dict(earnings_by_employee or {})

    def get_earnings(self, employee: Employee) -> EarningsInputs:
        return self.earnings_by_employee.get(employee.employee_id, EarningsInputs())
