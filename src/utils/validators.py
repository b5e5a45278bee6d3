import re
from decimal import Decimal, InvalidOperation
from typing import Optional
from utils.exceptions import InvalidInput

CENTAVO_PLACES = 2

SSS_NUMBER_PATTERN = r'^\d{2}-\d{7}-\d$'
PHILHEALTH_NUMBER_PATTERN = r'^\d{2}-\d{9}-\d$'
PAGIBIG_NUMBER_PATTERN = r'^\d{4}-\d{4}-\d{4}$'
TIN_PATTERN = r'^\d{3}-\d{3}-\d{3}-\d{3}$'


def validate_amount(value, field: str = "amount", max_places: Optional[int] = None) -> Decimal:
    """Coerce a peso amount to Decimal, rejecting missing, negative or non-numeric values"""
    if value is None:
        raise InvalidInput(f"{field} is missing")
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be numeric, got {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInput(f"{field} must be numeric, got {value!r}")
    if not amount.is_finite():
        raise InvalidInput(f"{field} must be finite, got {value!r}")
    if amount < 0:
        raise InvalidInput(f"{field} must not be negative, got {amount}")
    if max_places is not None and -amount.normalize().as_tuple().exponent > max_places:
        raise InvalidInput(f"{field} has more than {max_places} decimal places: {amount}")
    return amount


def validate_sss_number(sss_number: str) -> bool:
    """Validate SSS number format (XX-XXXXXXX-X)"""
    return bool(re.match(SSS_NUMBER_PATTERN, sss_number))


def validate_philhealth_number(philhealth_number: str) -> bool:
    """Validate PhilHealth identification number format (XX-XXXXXXXXX-X)"""
    return bool(re.match(PHILHEALTH_NUMBER_PATTERN, philhealth_number))


def validate_pagibig_number(pagibig_number: str) -> bool:
    """Validate Pag-IBIG MID number format (XXXX-XXXX-XXXX)"""
    return bool(re.match(PAGIBIG_NUMBER_PATTERN, pagibig_number))


def validate_tin(tin: str) -> bool:
    """Validate BIR TIN format (XXX-XXX-XXX-XXX)"""
    return bool(re.match(TIN_PATTERN, tin))


def validate_government_numbers(employee) -> None:
    """Raise InvalidInput for any government number that is present but malformed"""
    checks = [
        ('sss_number', validate_sss_number),
        ('philhealth_number', validate_philhealth_number),
        ('pagibig_number', validate_pagibig_number),
        ('tin_number', validate_tin),
    ]
    for field, check in checks:
        value = getattr(employee, field, '')
        if value and not check(value):
            raise InvalidInput(f"Employee {employee.employee_id}: malformed {field} {value!r}")
