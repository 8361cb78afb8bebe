"""Demo transactions shown when no data file is given."""

from datetime import date
from decimal import Decimal

from bizanalytics.domain.entities import Transaction

# (id, date, product, revenue, product cost, marketing cost, other expenses), in PKR
_SAMPLE_ROWS = [
    ("1", date(2024, 1, 15), "Consulting Service A", 500000, 50000, 120000, 30000),
    ("2", date(2024, 1, 20), "Product Sales B", 320000, 180000, 40000, 15000),
    ("3", date(2024, 2, 5), "Consulting Service A", 550000, 50000, 110000, 35000),
    ("4", date(2024, 2, 18), "Product Sales C", 120000, 90000, 20000, 5000),
    ("5", date(2024, 3, 10), "Premium Subscription", 800000, 100000, 250000, 50000),
    ("6", date(2024, 3, 25), "Product Sales B", 410000, 200000, 60000, 20000),
]


def sample_transactions() -> list[Transaction]:
    """Return a fresh list of the demo transactions."""
    return [
        Transaction(
            id=txn_id,
            date=txn_date,
            product_name=name,
            revenue=Decimal(revenue),
            product_cost=Decimal(product_cost),
            marketing_cost=Decimal(marketing_cost),
            other_expenses=Decimal(other_expenses),
        )
        for txn_id, txn_date, name, revenue, product_cost, marketing_cost, other_expenses in _SAMPLE_ROWS
    ]
