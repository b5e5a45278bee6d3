import logging
import sys
from datetime import date
from pathlib import Path

# Make `config` importable when run as `python src/main.py`
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import LOG_LEVEL, CURRENCY_SYMBOL
from api.mock_hris import MockHRISAPI
from database.db import init_db, SessionLocal
from database.repository import PayrollRepository
from models.payroll import PayrollPeriod
from processors.earnings import PercentageEarningsSource
from processors.payroll_runner import PayrollRunner
from processors.payroll_register_generator import PayrollRegisterGenerator
from processors.payslip_generator import PayslipGenerator
from processors.payroll_reports import contribution_breakdown, department_totals, monthly_payroll_total
from utils.formatters import format_currency

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point: run payroll for the current month"""
    logger.info("Starting SAHOD payroll engine")

    # Initialize database
    logger.info("Initializing database...")
    init_db()
    db = SessionLocal()

    try:
        repo = PayrollRepository(db)

        # Sync roster from the HRIS
        for employee in MockHRISAPI().get_all_employees():
            if repo.get_employee(employee.employee_id) is None:
                repo.save_employee(employee)

        today = date.today()
        period = PayrollPeriod.for_month(today.year, today.month)
        if period.period_id not in {p.period_id for p in repo.get_periods()}:
            repo.add_period(period)
            logger.info("Created payroll period %s", period.period_id)

        result = PayrollRunner(repo, PercentageEarningsSource()).run(period.period_id)
        register = PayrollRegisterGenerator().generate(result.period, result.records)
        logger.info("Payroll register written to %s", register)

        payslips = PayslipGenerator()
        for record in result.records:
            payslips.generate(record, result.period)
        logger.info("Wrote %d payslips", len(result.records))

        monthly_total = monthly_payroll_total(repo.get_periods(), result.records)
    finally:
        db.close()

    totals = result.period.totals
    print("=" * 60)
    print(f"Payroll {result.period.label} - {result.period.status}")
    print("=" * 60)
    print(f"Employees:   {totals.total_employees}")
    print(f"Gross pay:   {format_currency(totals.gross_pay, CURRENCY_SYMBOL)}")
    print(f"Deductions:  {format_currency(totals.deductions, CURRENCY_SYMBOL)}")
    print(f"Net pay:     {format_currency(totals.net_pay, CURRENCY_SYMBOL)}")
    print(f"Monthly payroll (latest completed): {format_currency(monthly_total, CURRENCY_SYMBOL)}")
    print("\nBy department:")
    for dept in department_totals(result.records):
        print(f"  {dept.department:<20} {dept.headcount:>3}  {format_currency(dept.net_pay, CURRENCY_SYMBOL)}")
    print("\nGovernment contributions:")
    for line in contribution_breakdown(result.records):
        print(f"  {line.name:<12} {format_currency(line.total, CURRENCY_SYMBOL)}")
    print("=" * 60)


if __name__ == "__main__":
    main()
