"""CSV export and import of the transaction collection."""

import csv
import io
import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Sequence, Union

from bizanalytics.domain.entities import Transaction
from bizanalytics.domain.errors import (
    ExportError,
    ValidationError,
    export_failed,
    invalid_csv_row,
    unreadable_csv,
)
from bizanalytics.domain.transaction import generate_transaction_id
from bizanalytics.utils.amount_parser import parse_amount
from bizanalytics.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "bizanalytics_data_pkr.csv"

EXPORT_HEADERS = (
    "Date",
    "Product/Service",
    "Revenue",
    "Product Cost",
    "Marketing Cost",
    "Other Expenses",
    "Total Cost",
    "Net Profit",
)

# Columns an imported file must carry; Total Cost and Net Profit are recomputed.
REQUIRED_IMPORT_COLUMNS = EXPORT_HEADERS[:6]


def _plain_amount(value: Decimal) -> Decimal:
    # Fixed-point form so amounts never render in exponent notation
    return Decimal(format(value, "f"))


def export_transactions_csv(transactions: Sequence[Transaction]) -> str:
    """Render transactions as a CSV document.

    Text columns (date and product name) are always quoted, with embedded
    quotes doubled; amount columns are written bare. Rows are separated by
    a single newline and there is no trailing newline.

    Args:
        transactions: Transactions in display order

    Returns:
        CSV text with a header row and one row per transaction
    """
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(EXPORT_HEADERS)

    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_NONNUMERIC)
    for txn in transactions:
        writer.writerow(
            [txn.date.isoformat(), txn.product_name]
            + [
                _plain_amount(amount)
                for amount in (
                    txn.revenue,
                    txn.product_cost,
                    txn.marketing_cost,
                    txn.other_expenses,
                    txn.total_cost,
                    txn.net_profit,
                )
            ]
        )
    return buffer.getvalue().removesuffix("\n")


def write_transactions_csv(
    transactions: Sequence[Transaction], path: Union[str, Path]
) -> Path:
    """Write the CSV export to a file and return its path.

    Raises:
        ExportError: If the file cannot be written
    """
    csv_path = Path(path)
    try:
        csv_path.write_text(export_transactions_csv(transactions), encoding="utf-8")
    except OSError as e:
        raise ExportError(export_failed(csv_path, e.strerror or str(e))) from e
    logger.info("Exported %d transactions to %s", len(transactions), csv_path)
    return csv_path


def parse_transactions_csv(lines: Iterable[str]) -> list[Transaction]:
    """Parse CSV text in the export layout into transactions.

    Every row gets a fresh ID. Rows with a blank product name are skipped,
    matching the rule applied when adding records by hand.

    Args:
        lines: CSV lines, header first

    Returns:
        Parsed transactions in file order

    Raises:
        ValidationError: If required columns are missing or a row is malformed
    """
    reader = csv.DictReader(lines)

    csv_columns = reader.fieldnames
    if csv_columns is None:
        raise ValidationError("CSV file has no columns")

    missing_columns = [col for col in REQUIRED_IMPORT_COLUMNS if col not in csv_columns]
    if missing_columns:
        raise ValidationError(
            f"CSV file missing required columns: {', '.join(missing_columns)}"
        )

    transactions = []
    for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is row 1)
        product_name = (row.get("Product/Service") or "").strip()
        if not product_name:
            logger.warning("Skipping row %d: missing product name", row_num)
            continue

        try:
            txn_date = parse_date(row.get("Date") or "")
            amounts = [
                parse_amount(row.get(col) or "0") for col in REQUIRED_IMPORT_COLUMNS[2:]
            ]
        except ValueError as e:
            raise ValidationError(invalid_csv_row(row_num, str(e))) from e

        transactions.append(
            Transaction(
                id=generate_transaction_id(),
                date=txn_date,
                product_name=product_name,
                revenue=amounts[0],
                product_cost=amounts[1],
                marketing_cost=amounts[2],
                other_expenses=amounts[3],
            )
        )

    return transactions


def read_transactions_csv(csv_file_path: Union[str, Path]) -> list[Transaction]:
    """Read transactions from a CSV file in the export layout.

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValidationError: If the file content is invalid
    """
    csv_path = Path(csv_file_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
        try:
            return parse_transactions_csv(f)
        except (UnicodeDecodeError, csv.Error) as e:
            raise ValidationError(unreadable_csv(csv_file_path, str(e))) from e
