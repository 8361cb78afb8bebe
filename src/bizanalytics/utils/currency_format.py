"""PKR display formatting."""

from decimal import ROUND_HALF_UP, Decimal


def format_pkr(amount: Decimal) -> str:
    """Format an amount as whole rupees, e.g. "PKR 1,234,567"."""
    rounded = Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = Decimal(0)
    if rounded < 0:
        return f"-PKR {-rounded:,}"
    return f"PKR {rounded:,}"


def format_compact(amount: Decimal) -> str:
    """Format an amount for chart axes: "1.2M", "500k", or plain below 1000."""
    value = float(amount)
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1000:
        return f"{value / 1000:.0f}k"
    return f"{value:g}"


def format_percent(value: Decimal) -> str:
    return f"{float(value):.1f}%"
