"""Text helpers shared by the aggregators and the insight messages."""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def display_category(category: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    ``str.capitalize`` is not used because it lower-cases the remainder
    ("eBay" must stay "EBay", not become "Ebay").
    """
    return category[:1].upper() + category[1:]


def round_half_up(value: Decimal, exp: Decimal = Decimal("1")) -> Decimal:
    return value.quantize(exp, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount as e.g. ``$1,234.50``."""
    quantized = round_half_up(Decimal(amount), CENTS)
    sign = "-" if quantized < 0 else ""
    return f"{sign}{symbol}{abs(quantized):,.2f}"
