"""Amount parsing and currency formatting utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CURRENCY_SYMBOL = "R$"


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-typed amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "R$ 123.45"
    - "1,234.56"
    - "1.234,56" (comma as decimal separator)
    - "123,45"

    The result is quantized to two fractional digits. Sign is kept so the
    caller can reject non-positive amounts.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str).replace(" ", "")

    # The last separator is the decimal point when both appear
    if "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".")
        else:
            amount_str = amount_str.replace(",", "")
    elif "," in amount_str:
        whole, _, fraction = amount_str.rpartition(",")
        if len(fraction) == 3 and whole.lstrip("-"):
            amount_str = amount_str.replace(",", "")
        else:
            amount_str = f"{whole.replace(',', '')}.{fraction}"

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    try:
        return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Amount '{amount_str}' is too large")


def format_currency(amount: Decimal) -> str:
    """Format an amount in the ledger's fixed locale, e.g. ``R$ 1.234,56``."""
    quantized = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    text = f"{abs(quantized):,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {text}"
