"""Shared domain error messages and error types."""

from typing import Sequence


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class StatementParseError(DomainError):
    """A bank statement could not be turned into any transactions."""

    def __init__(self, errors: Sequence[str], bank_name: str):
        self.errors = list(errors)
        self.bank_name = bank_name
        super().__init__(statement_parse_failed(self.errors, bank_name))


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def account_name_taken(name: str) -> str:
    """Return message for a duplicate account name."""
    return f"Account with name '{name}' already exists"


def transactions_not_owned() -> str:
    """Return message when selected transactions are missing or span accounts."""
    return "Some transactions not found or belong to different accounts"


def transactions_already_reconciled(count: int) -> str:
    """Return message when some selected transactions are already reconciled."""
    return f"{count} transaction(s) are already reconciled"


def statement_parse_failed(errors: Sequence[str], bank_name: str) -> str:
    """Return message for a statement that produced no transactions."""
    detail = "; ".join(errors) if errors else "no transactions found"
    return f"Failed to parse CSV (detected bank: {bank_name}): {detail}"
