from typing import Optional
from models.employee import Employee
from models.payroll import EarningsInputs, PayrollRecord
from processors.contribution_calculator import ContributionCalculator
from utils.validators import validate_amount, CENTAVO_PLACES


class PayrollRecordBuilder:
    """Combine basic salary and supplementary earnings into one PayrollRecord"""

    def __init__(self, calculator: Optional[ContributionCalculator] = None):
        self.calculator = calculator or ContributionCalculator()

    def build(self, employee: Employee, earnings: EarningsInputs, period_id: str) -> PayrollRecord:
        """
        Build the payroll record for one employee and period.

        Deductions are computed on basic salary alone; gross pay adds the
        supplementary earnings. Each deduction is rounded to a whole peso
        before it is summed, so gross, deductions and net reconcile exactly.
        A missing or negative amount raises InvalidInput before anything is computed.
        """
        who = employee.employee_id
        basic = validate_amount(employee.basic_salary, f"basic salary of {who}", CENTAVO_PLACES)
        overtime = validate_amount(earnings.overtime, f"overtime of {who}", CENTAVO_PLACES)
        holiday = validate_amount(earnings.holiday, f"holiday pay of {who}", CENTAVO_PLACES)
        allowances = validate_amount(earnings.allowances, f"allowances of {who}", CENTAVO_PLACES)

        gross_pay = basic + overtime + holiday + allowances
        deductions = self.calculator.compute(basic).rounded()
        total_deductions = deductions.total

        return PayrollRecord(
            record_id=PayrollRecord.make_id(period_id, who),
            period_id=period_id,
            employee_id=who,
            employee_name=employee.name,
            department=employee.department,
            position=employee.position,
            basic_salary=basic,
            overtime=overtime,
            holiday=holiday,
            allowances=allowances,
            gross_pay=gross_pay,
            sss=deductions.sss,
            philhealth=deductions.philhealth,
            pagibig=deductions.pagibig,
            tax=deductions.tax,
            total_deductions=total_deductions,
            # Not clamped: a negative net pay must surface
            net_pay=gross_pay - total_deductions
        )
