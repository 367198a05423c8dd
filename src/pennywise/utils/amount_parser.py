"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles formats such as "123.45", "R$123.45", "$1,234.56" and "€ 10".
    Amounts are always positive; the transaction type carries the sign, so a
    leading minus or parentheses are rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    if amount_str.startswith("-") or (amount_str.startswith("(") and amount_str.endswith(")")):
        raise ValueError(
            f"Amount '{amount_str}' is negative; use --type to record an expense"
        )

    cleaned = re.sub(r"R\$|[$€£¥]", "", amount_str)
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
