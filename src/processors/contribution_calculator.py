from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple
from models.payroll import Contributions
from utils.validators import validate_amount

ZERO = Decimal('0')


@dataclass(frozen=True)
class TaxBracket:
    """
    Monthly withholding tax bracket.

    Applies when the taxable base is above `threshold`; the tax is then
    `base_amount + (taxable - lower_bound) * rate`.
    """
    threshold: Decimal
    lower_bound: Decimal
    rate: Decimal
    base_amount: Decimal


@dataclass(frozen=True)
class ContributionSchedule:
    """Statutory tables used by ContributionCalculator"""
    # (upper_bound, amount), ascending; a salary below upper_bound falls in the band
    sss_bands: Tuple[Tuple[Decimal, Decimal], ...]
    sss_ceiling: Decimal
    philhealth_rate: Decimal
    philhealth_cap: Decimal
    pagibig_rate: Decimal
    pagibig_cap: Decimal
    # Ascending by threshold; below the first threshold no tax is due
    tax_brackets: Tuple[TaxBracket, ...]


def _d(value: str) -> Decimal:
    return Decimal(value)


PH_2024_SCHEDULE = ContributionSchedule(
    sss_bands=(
        (_d('4250'), _d('180')),
        (_d('4750'), _d('202.5')),
        (_d('5250'), _d('225')),
        (_d('5750'), _d('247.5')),
        (_d('6250'), _d('270')),
        (_d('6750'), _d('292.5')),
        (_d('7250'), _d('315')),
        (_d('7750'), _d('337.5')),
        (_d('8250'), _d('360')),
        (_d('8750'), _d('382.5')),
        (_d('9250'), _d('405')),
        (_d('9750'), _d('427.5')),
        (_d('10250'), _d('450')),
        (_d('10750'), _d('472.5')),
        (_d('11250'), _d('495')),
        (_d('11750'), _d('517.5')),
        (_d('12250'), _d('540')),
        (_d('12750'), _d('562.5')),
        (_d('13250'), _d('585')),
        (_d('13750'), _d('607.5')),
        (_d('14250'), _d('630')),
        (_d('14750'), _d('652.5')),
        (_d('15250'), _d('675')),
        (_d('15750'), _d('697.5')),
        (_d('16250'), _d('720')),
        (_d('16750'), _d('742.5')),
        (_d('17250'), _d('765')),
        (_d('17750'), _d('787.5')),
        (_d('18250'), _d('810')),
        (_d('18750'), _d('832.5')),
    ),
    sss_ceiling=_d('900'),
    # 5% premium split equally between employee and employer
    philhealth_rate=_d('0.025'),
    philhealth_cap=_d('2500'),
    pagibig_rate=_d('0.02'),
    pagibig_cap=_d('100'),
    tax_brackets=(
        TaxBracket(_d('20833'), _d('20833'), _d('0.20'), _d('0')),
        TaxBracket(_d('33332'), _d('33333'), _d('0.25'), _d('2500')),
        TaxBracket(_d('66666'), _d('66667'), _d('0.30'), _d('10833')),
        TaxBracket(_d('166666'), _d('166667'), _d('0.32'), _d('40833')),
        TaxBracket(_d('666666'), _d('666667'), _d('0.35'), _d('200833')),
    ),
)


class ContributionCalculator:
    """Compute employee-share statutory deductions from a monthly basic salary"""

    def __init__(self, schedule: ContributionSchedule = PH_2024_SCHEDULE):
        self.schedule = schedule
        self._sss_bounds = [upper for upper, _ in schedule.sss_bands]
        self._tax_thresholds = [bracket.threshold for bracket in schedule.tax_brackets]

    def compute(self, basic_salary) -> Contributions:
        """Compute SSS, PhilHealth, Pag-IBIG and withholding tax (unrounded)"""
        basic = validate_amount(basic_salary, "basic salary")

        sss = self._sss(basic)
        philhealth = self._philhealth(basic)
        pagibig = self._pagibig(basic)
        tax = self._withholding_tax(basic - sss - philhealth - pagibig)

        return Contributions(sss=sss, philhealth=philhealth, pagibig=pagibig, tax=tax)

    def sss(self, basic_salary) -> Decimal:
        return self._sss(validate_amount(basic_salary, "basic salary"))

    def philhealth(self, basic_salary) -> Decimal:
        return self._philhealth(validate_amount(basic_salary, "basic salary"))

    def pagibig(self, basic_salary) -> Decimal:
        return self._pagibig(validate_amount(basic_salary, "basic salary"))

    def withholding_tax(self, basic_salary) -> Decimal:
        """Tax on basic salary net of the other three contributions"""
        basic = validate_amount(basic_salary, "basic salary")
        taxable = basic - self._sss(basic) - self._philhealth(basic) - self._pagibig(basic)
        return self._withholding_tax(taxable)

    def _sss(self, basic: Decimal) -> Decimal:
        # Boundary salaries belong to the upper band
        index = bisect_right(self._sss_bounds, basic)
        if index == len(self._sss_bounds):
            return self.schedule.sss_ceiling
        return self.schedule.sss_bands[index][1]

    def _philhealth(self, basic: Decimal) -> Decimal:
        return min(basic * self.schedule.philhealth_rate, self.schedule.philhealth_cap)

    def _pagibig(self, basic: Decimal) -> Decimal:
        return min(basic * self.schedule.pagibig_rate, self.schedule.pagibig_cap)

    def _withholding_tax(self, taxable: Decimal) -> Decimal:
        # Last bracket whose threshold is strictly below the taxable base
        index = bisect_left(self._tax_thresholds, taxable)
        if index == 0:
            return ZERO
        bracket = self.schedule.tax_brackets[index - 1]
        tax = bracket.base_amount + (taxable - bracket.lower_bound) * bracket.rate
        return max(ZERO, tax)
