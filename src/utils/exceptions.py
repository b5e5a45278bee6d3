class PayrollError(Exception):
    """Base class for payroll engine errors"""


class InvalidInput(PayrollError, ValueError):
    """Negative, missing or non-numeric salary/earnings, or a bad request"""


class NotFound(PayrollError, LookupError):
    """Referenced period or employee does not exist"""


class InconsistentState(PayrollError, RuntimeError):
    """Stored records disagree with the totals computed for them"""
