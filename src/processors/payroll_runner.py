import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional
from database.repository import PayrollRepository
from models.payroll import PayrollPeriod, PayrollRecord, PeriodTotals
from processors.earnings import EarningsSource
from processors.payroll_builder import PayrollRecordBuilder
from utils.exceptions import InconsistentState, InvalidInput

logger = logging.getLogger(__name__)


@dataclass
class PayrollRunResult:
    """Outcome of a payroll run"""
    period: PayrollPeriod
    records: List[PayrollRecord] = field(default_factory=list)


class PayrollRunner:
    """Run payroll for a period: build records for the active roster and store them with the period totals"""

    def __init__(self, repository: PayrollRepository, earnings_source: EarningsSource,
                 builder: Optional[PayrollRecordBuilder] = None,
                 today: Callable[[], date] = date.today):
        self.repo = repository
        self.earnings_source = earnings_source
        self.builder = builder or PayrollRecordBuilder()
        self.today = today

    def run(self, period_id: str) -> PayrollRunResult:
        """
        Compute and store payroll for one period.

        All records are built before anything is written. The record
        replacement, the consistency check and the period update share one
        transaction, so a failure leaves the previous records and the
        previous period status in place. Running the same period again with
        unchanged inputs yields the same records and totals.
        """
        period = self.repo.get_period(period_id)
        if period.status == 'cancelled':
            raise InvalidInput(f"Payroll period {period_id} is cancelled and cannot be run")

        employees = [e for e in self.repo.get_active_employees() if e.is_active]
        logger.info("Running payroll for %s (%s) with %d active employees",
                    period.period_id, period.label, len(employees))

        records = [
            self.builder.build(employee, self.earnings_source.get_earnings(employee), period_id)
            for employee in employees
        ]
        totals = PeriodTotals.from_records(records)

        with self.repo.atomic():
            self.repo.replace_period_records(period_id, records)
            self._check_consistency(period_id, totals)
            period = self.repo.update_period(period_id, totals, 'completed', self.today())

        logger.info("Payroll for %s completed: gross %s, deductions %s, net %s",
                    period_id, totals.gross_pay, totals.deductions, totals.net_pay)
        return PayrollRunResult(period=period, records=records)

    def _check_consistency(self, period_id: str, totals: PeriodTotals):
        stored = PeriodTotals.from_records(self.repo.get_period_records(period_id))
        if stored != totals:
            raise InconsistentState(
                f"Stored records for {period_id} total {stored}, expected {totals}"
            )
