"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Union

AmountInput = Union[str, int, float, Decimal]


def parse_amount(amount: AmountInput) -> Decimal:
    """Coerce an amount into a Decimal.

    Numbers are converted directly. Strings may use various formats:
    - "123.45"
    - "Rs 123.45", "PKR 1,234", "₨500"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount: Amount as a number or string

    Returns:
        Decimal amount

    Raises:
        ValueError: If the amount cannot be parsed or is not finite
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount '{amount}'")

    if isinstance(amount, Decimal):
        result = amount
    elif isinstance(amount, (int, float)):
        # str() keeps 0.1 as 0.1 instead of the binary expansion
        result = Decimal(str(amount))
    else:
        result = _parse_amount_string(str(amount))

    if not result.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{amount}'")
    return result


def _parse_amount_string(amount_str: str) -> Decimal:
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency markers
    amount_str = re.sub(r"(?i)pkr|rs\.?|[₨$]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}") from e
    return -amount if is_negative else amount
