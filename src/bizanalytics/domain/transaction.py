"""Transaction domain service."""

import dataclasses
import logging
import uuid
from datetime import date as date_type
from typing import TYPE_CHECKING, Optional, Union

from bizanalytics.domain.entities import (
    MutationOutcome,
    MutationResult,
    Transaction,
)
from bizanalytics.domain.errors import (
    ValidationError,
    invalid_amount,
    unknown_field,
)
from bizanalytics.utils.amount_parser import AmountInput, parse_amount
from bizanalytics.utils.date_parser import parse_date

if TYPE_CHECKING:
    from bizanalytics.store.base import RecordStore

logger = logging.getLogger(__name__)

AMOUNT_FIELDS = ("revenue", "product_cost", "marketing_cost", "other_expenses")
EDITABLE_FIELDS = ("date", "product_name") + AMOUNT_FIELDS


def generate_transaction_id() -> str:
    """Return a fresh opaque transaction ID."""
    return uuid.uuid4().hex[:12]


class TransactionService:
    """Service for editing the transaction collection.

    Every change replaces the store's collection with a new one. Rejected
    or unmatched requests leave the store untouched and report why through
    the returned MutationResult.
    """

    def __init__(self, store: "RecordStore"):
        """Initialize transaction service.

        Args:
            store: Record store instance
        """
        self.store = store

    def list_transactions(self) -> tuple[Transaction, ...]:
        """Return the current collection, newest first."""
        return self.store.list_transactions()

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.store.get_transaction(transaction_id)

    def add_transaction(
        self,
        product_name: Optional[str],
        date: Union[str, date_type, None] = None,
        revenue: AmountInput = 0,
        product_cost: AmountInput = 0,
        marketing_cost: AmountInput = 0,
        other_expenses: AmountInput = 0,
    ) -> MutationResult:
        """Add a transaction at the front of the collection.

        Args:
            product_name: Product or service label; blank names are rejected
            date: Transaction date, defaults to today
            revenue: Revenue amount
            product_cost: Product cost amount
            marketing_cost: Marketing cost amount
            other_expenses: Other expenses amount

        Returns:
            MutationResult with ADDED, or REJECTED_EMPTY_NAME when the name is blank

        Raises:
            ValidationError: If an amount or the date cannot be parsed
        """
        if not product_name or not product_name.strip():
            logger.info("Rejected transaction with empty product name")
            return MutationResult(MutationOutcome.REJECTED_EMPTY_NAME)

        txn = Transaction(
            id=generate_transaction_id(),
            date=self._coerce_date(date) if date is not None else date_type.today(),
            product_name=product_name,
            revenue=self._coerce_amount("revenue", revenue),
            product_cost=self._coerce_amount("product_cost", product_cost),
            marketing_cost=self._coerce_amount("marketing_cost", marketing_cost),
            other_expenses=self._coerce_amount("other_expenses", other_expenses),
        )

        self.store.replace_all((txn,) + self.store.list_transactions())
        logger.info("Added transaction %s (%s)", txn.id, txn.product_name)
        return MutationResult(MutationOutcome.ADDED, txn)

    def update_field(
        self, transaction_id: str, field: str, value: Union[str, date_type, AmountInput]
    ) -> MutationResult:
        """Replace a single field on a transaction.

        Args:
            transaction_id: Transaction ID
            field: One of EDITABLE_FIELDS
            value: New value; dates and amounts are coerced

        Returns:
            MutationResult with UPDATED, or NOT_FOUND when no record matches

        Raises:
            ValidationError: If the field is not editable or the value cannot be parsed
        """
        if field not in EDITABLE_FIELDS:
            raise ValidationError(unknown_field(field, EDITABLE_FIELDS))

        if field == "date":
            new_value = self._coerce_date(value)
        elif field == "product_name":
            new_value = "" if value is None else str(value)
        else:
            new_value = self._coerce_amount(field, value)

        updated = None
        transactions = []
        for txn in self.store.list_transactions():
            if txn.id == transaction_id:
                txn = dataclasses.replace(txn, **{field: new_value})
                updated = txn
            transactions.append(txn)

        if updated is None:
            logger.info("Update skipped, transaction %s not found", transaction_id)
            return MutationResult(MutationOutcome.NOT_FOUND)

        self.store.replace_all(transactions)
        logger.info("Updated %s on transaction %s", field, transaction_id)
        return MutationResult(MutationOutcome.UPDATED, updated)

    def delete_transaction(self, transaction_id: str) -> MutationResult:
        """Delete a transaction.

        Args:
            transaction_id: Transaction ID to delete

        Returns:
            MutationResult with DELETED, or NOT_FOUND when no record matches
        """
        deleted = self.store.get_transaction(transaction_id)
        if deleted is None:
            logger.info("Delete skipped, transaction %s not found", transaction_id)
            return MutationResult(MutationOutcome.NOT_FOUND)

        self.store.replace_all(
            txn for txn in self.store.list_transactions() if txn.id != transaction_id
        )
        logger.info("Deleted transaction %s", transaction_id)
        return MutationResult(MutationOutcome.DELETED, deleted)

    @staticmethod
    def _coerce_amount(field: str, value: AmountInput):
        try:
            return parse_amount(value)
        except ValueError as e:
            raise ValidationError(invalid_amount(field, value)) from e

    @staticmethod
    def _coerce_date(value: Union[str, date_type]) -> date_type:
        try:
            return parse_date(value)
        except (ValueError, AttributeError) as e:
            raise ValidationError(f"Invalid date '{value}': {e}") from e
