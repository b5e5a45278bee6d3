from .contribution_calculator import ContributionCalculator, ContributionSchedule, TaxBracket, PH_2024_SCHEDULE
from .earnings import EarningsSource, PercentageEarningsSource, FixedEarningsSource
from .payroll_builder import PayrollRecordBuilder
from .payroll_runner import PayrollRunner, PayrollRunResult
from .payslip_generator import PayslipGenerator
from .payroll_register_generator import PayrollRegisterGenerator


__all__ = [
    'ContributionCalculator',
    'ContributionSchedule',
    'TaxBracket',
    'PH_2024_SCHEDULE',
    'EarningsSource',
    'PercentageEarningsSource',
    'FixedEarningsSource',
    'PayrollRecordBuilder',
    'PayrollRunner',
    'PayrollRunResult',
    'PayslipGenerator',
    'PayrollRegisterGenerator'
]
