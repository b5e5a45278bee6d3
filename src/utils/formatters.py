from decimal import Decimal, ROUND_HALF_UP
from datetime import date

WHOLE_PESO = Decimal('1')


def round_peso(amount: Decimal) -> Decimal:
    """Round half-up to a whole peso"""
    return amount.quantize(WHOLE_PESO, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = "₱") -> str:
    """Format currency amount, keeping the sign in front of the symbol"""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_date(d: date) -> str:
    """Format date as YYYY-MM-DD"""
    return d.strftime("%Y-%m-%d")


def format_period_label(d: date) -> str:
    """Month label such as 'March 2026'"""
    return d.strftime("%B %Y")
