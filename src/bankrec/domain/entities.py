"""Domain model entities for bankrec.

These are pure data classes representing business concepts, independent of
database schema. Parsed statement rows and ledger rows are kept apart: a
ParsedTransaction has no identity until the importer persists it.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionDirection(str, Enum):
    """Direction of money flow; amounts themselves are never negative."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Account:
    """Bank account domain entity."""

    id: int
    name: str
    bank_name: str
    account_number: Optional[str]
    currency: str
    current_balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction domain entity."""

    id: int
    account_id: int
    date: date
    description: str
    amount: Decimal
    direction: TransactionDirection
    reference: Optional[str]
    category_id: Optional[int]
    is_reconciled: bool
    reconciled_at: Optional[datetime]
    imported_at: datetime

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the direction applied (expenses negative)."""
        if self.direction is TransactionDirection.INCOME:
            return self.amount
        return -self.amount


@dataclass(frozen=True)
class ParsedTransaction:
    """A statement row extracted by a bank parser, not yet persisted."""

    date: date
    description: str
    amount: Decimal
    direction: TransactionDirection
    reference: Optional[str] = None
    balance: Optional[Decimal] = None

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Parsed amount must not be negative: {self.amount}")

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the direction applied (expenses negative)."""
        if self.direction is TransactionDirection.INCOME:
            return self.amount
        return -self.amount


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one uploaded statement."""

    success: bool
    transactions: tuple[ParsedTransaction, ...] = ()
    errors: tuple[str, ...] = ()
    bank_name: str = "Unknown"
    account_number: Optional[str] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class ImportResult:
    """Counts reported after importing a statement into the ledger."""

    imported: int
    duplicates: int
    message: str
    bank_name: str
    parse_errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome of reconciling a selection of ledger transactions."""

    reconciled: int
    selected_total: Decimal
    statement_balance: Optional[Decimal]
    statement_date: Optional[date]
    difference: Optional[Decimal]

    @property
    def is_balanced(self) -> Optional[bool]:
        """Whether the statement balance agrees, or None when none was given."""
        if self.difference is None:
            return None
        return abs(self.difference) < Decimal("0.01")
