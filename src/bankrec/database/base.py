"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Iterable, Optional, Sequence
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from bankrec.domain.entities import (
    Account,
    Category,
    Transaction,
    TransactionDirection,
    ParsedTransaction,
)


class Database(ABC):
    """Abstract database interface for bankrec.

    Write operations commit immediately unless they run inside ``atomic()``,
    in which case they are committed or rolled back together when the
    outermost block exits.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Run the enclosed operations as a single database transaction."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        bank_name: str,
        account_number: Optional[str] = None,
        currency: str = "ZAR",
        opening_balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a new bank account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def lock_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID, locking its row until the current transaction ends."""
        pass

    @abstractmethod
    def adjust_account_balance(self, account_id: int, delta: Decimal) -> None:
        """Add a signed amount to the account's current balance."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        account_id: int,
        date: date,
        description: str,
        amount: Decimal,
        direction: TransactionDirection,
        reference: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a single unreconciled transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def add_transactions(
        self,
        account_id: int,
        transactions: Sequence[ParsedTransaction],
        category_id: Optional[int] = None,
    ) -> int:
        """Insert parsed transactions as unreconciled ledger rows. Returns count."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def get_transactions(self, transaction_ids: Iterable[int]) -> list[Transaction]:
        """Get every existing transaction among the given IDs."""
        pass

    @abstractmethod
    def find_transactions_on_dates(self, account_id: int, dates: Iterable[date]) -> list[Transaction]:
        """Get the account's transactions dated on any of the given days."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        account_id: Optional[int] = None,
        reconciled: Optional[bool] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters.

        Args:
            account_id: Optional account ID filter
            reconciled: If set, only return transactions with that reconciliation state
            start_date: Optional start date filter
            end_date: Optional end date filter
        """
        pass

    @abstractmethod
    def mark_reconciled(self, transaction_ids: Sequence[int], reconciled_at: datetime) -> int:
        """Flag transactions as reconciled. Returns number of rows updated."""
        pass

    @abstractmethod
    def mark_unreconciled(self, transaction_ids: Sequence[int]) -> int:
        """Clear the reconciliation flag. Returns number of rows updated."""
        pass
