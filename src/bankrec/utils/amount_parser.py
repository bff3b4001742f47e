"""Amount parsing utilities."""

from decimal import Decimal, ROUND_HALF_UP
import re

# Leading currency symbol or ISO code, e.g. "R 1,200.00", "ZAR1200", "$5"
_CURRENCY_PREFIX = re.compile(r"^(-?)\s*(?:ZAR|USD|EUR|GBP|R|\$|€|£|¥)", re.IGNORECASE)

# Optional sign, digits, optional fraction; no exponents
_PLAIN_DECIMAL = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

CENT = Decimal("0.01")

# Ledger amounts are stored as Numeric(15, 2)
MAX_AMOUNT = Decimal("10") ** 13


def parse_statement_amount(amount_str: str) -> Decimal:
    """Parse an amount cell from a bank statement export.

    Strips a currency symbol or code, all whitespace and thousands
    separators, then parses the rest as a plain decimal. A leading minus
    sign is kept so single-column layouts can infer direction from it.

    Args:
        amount_str: Raw cell text, e.g. "R -1 250.00" or "-1,250.00"

    Returns:
        Decimal amount (may be negative)

    Raises:
        ValueError: If the cell is empty, not a plain number, or too large
            to store
    """
    text = re.sub(r"\s+", "", amount_str or "")
    if not text:
        raise ValueError("Empty amount string")

    text = _CURRENCY_PREFIX.sub(r"\1", text).replace(",", "")

    if not _PLAIN_DECIMAL.match(text):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    amount = Decimal(text)
    if abs(amount) >= MAX_AMOUNT:
        raise ValueError(f"Amount out of range '{amount_str}'")
    return amount


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string given on the command line.

    Handles various formats:
    - "123.45"
    - "R123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

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

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount = parse_statement_amount(amount_str)
    return -amount if is_negative else amount


def round_to_cents(amount: Decimal) -> Decimal:
    """Round an amount to two decimal places, half up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
