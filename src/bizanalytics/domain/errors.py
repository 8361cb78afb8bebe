"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ExportError(DomainError):
    """A CSV export could not be written."""


def unknown_field(field_name: str, allowed: tuple[str, ...]) -> str:
    """Return message for an update targeting an unknown field."""
    return f"Unknown field '{field_name}'. Editable fields: {', '.join(allowed)}"


def invalid_amount(field_name: str, value: object) -> str:
    """Return message for a value that cannot be coerced to an amount."""
    return f"Invalid {field_name} '{value}': must be a number"


def invalid_csv_row(row_num: int, reason: str) -> str:
    """Return message for a malformed CSV row."""
    return f"Row {row_num}: {reason}"


def unreadable_csv(path: object, reason: str) -> str:
    """Return message for a CSV file that cannot be decoded or parsed."""
    return f"Cannot read CSV file {path}: {reason}"


def export_failed(path: object, reason: str) -> str:
    """Return message for a CSV export that could not be written."""
    return f"Cannot write CSV export to {path}: {reason}"
