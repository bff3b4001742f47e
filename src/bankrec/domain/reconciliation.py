"""Reconciliation domain service.

Reconciliation is a user-asserted act: the user selects ledger rows that
appear on a bank statement and marks them reconciled. The comparison against
the statement balance is reported back but never blocks the commit.
"""

import logging
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from bankrec.database.base import Database
from bankrec.domain.entities import ReconciliationResult, Transaction
from bankrec.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    transactions_already_reconciled,
    transactions_not_owned,
)
from bankrec.utils.amount_parser import round_to_cents

logger = logging.getLogger(__name__)


def selected_total(transactions: Iterable[Transaction]) -> Decimal:
    """Sum transactions with income positive and expenses negative."""
    return sum((txn.signed_amount for txn in transactions), Decimal("0"))


def statement_difference(
    statement_balance: Decimal, current_balance: Decimal, total: Decimal
) -> Decimal:
    """Return how far the statement balance is from the ledger plus the selection."""
    return round_to_cents(statement_balance - current_balance - total)


class ReconciliationService:
    """Service for reconciling ledger transactions against bank statements."""

    def __init__(self, db: Database):
        """Initialize reconciliation service.

        Args:
            db: Database instance
        """
        self.db = db

    def preview(
        self,
        transaction_ids: Sequence[int],
        account_id: int,
        statement_balance: Optional[Decimal] = None,
        statement_date: Optional[date] = None,
    ) -> ReconciliationResult:
        """Validate a selection and compute its totals without reconciling it.

        Takes the same arguments and raises the same errors as ``reconcile``;
        the returned result reports ``reconciled=0``.
        """
        ids = self._normalize_ids(transaction_ids)
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        transactions = self._validate_selection(ids, account_id)
        return self._build_result(0, transactions, account.current_balance, statement_balance, statement_date)

    def reconcile(
        self,
        transaction_ids: Sequence[int],
        account_id: int,
        statement_balance: Optional[Decimal] = None,
        statement_date: Optional[date] = None,
    ) -> ReconciliationResult:
        """Mark a selection of ledger transactions as reconciled.

        Every ID must belong to the account and be unreconciled, otherwise
        nothing is changed. Validation and the update run in one database
        transaction with the account row locked.

        Args:
            transaction_ids: IDs of the selected transactions
            account_id: Bank account the statement belongs to
            statement_balance: Optional closing balance reported by the bank
            statement_date: Optional statement date

        Returns:
            ReconciliationResult with the count, signed total and, when a
            statement balance was given, the difference

        Raises:
            ValidationError: If no IDs are given, or any ID is unknown, belongs
                to another account or is already reconciled
            NotFoundError: If the account doesn't exist
        """
        ids = self._normalize_ids(transaction_ids)

        with self.db.atomic():
            account = self.db.lock_account(account_id)
            if account is None:
                raise NotFoundError(account_not_found(account_id))

            transactions = self._validate_selection(ids, account_id)
            reconciled = self.db.mark_reconciled(ids, datetime.now(UTC))

        result = self._build_result(
            reconciled, transactions, account.current_balance, statement_balance, statement_date
        )
        logger.info(
            "Reconciled %d transactions on account %d (total %s, balanced: %s)",
            reconciled,
            account_id,
            result.selected_total,
            result.is_balanced,
        )
        return result

    def unreconcile(self, transaction_ids: Sequence[int], account_id: int) -> int:
        """Clear the reconciliation flag on transactions of an account.

        IDs that belong to other accounts or are not reconciled are ignored.

        Args:
            transaction_ids: IDs of transactions to reopen
            account_id: Bank account ID

        Returns:
            Number of transactions unreconciled

        Raises:
            ValidationError: If no IDs are given
            NotFoundError: If the account doesn't exist
        """
        ids = self._normalize_ids(transaction_ids)

        with self.db.atomic():
            if self.db.lock_account(account_id) is None:
                raise NotFoundError(account_not_found(account_id))
            owned = [txn.id for txn in self.db.get_transactions(ids) if txn.account_id == account_id]
            count = self.db.mark_unreconciled(owned)

        logger.info("Unreconciled %d transactions on account %d", count, account_id)
        return count

    @staticmethod
    def _normalize_ids(transaction_ids: Sequence[int]) -> list[int]:
        ids = list(dict.fromkeys(transaction_ids))
        if not ids:
            raise ValidationError("Transaction IDs are required")
        return ids

    def _validate_selection(self, ids: list[int], account_id: int) -> list[Transaction]:
        transactions = [txn for txn in self.db.get_transactions(ids) if txn.account_id == account_id]
        if len(transactions) != len(ids):
            raise ValidationError(transactions_not_owned())

        already = [txn for txn in transactions if txn.is_reconciled]
        if already:
            raise ValidationError(transactions_already_reconciled(len(already)))
        return transactions

    @staticmethod
    def _build_result(
        reconciled: int,
        transactions: list[Transaction],
        current_balance: Decimal,
        statement_balance: Optional[Decimal],
        statement_date: Optional[date],
    ) -> ReconciliationResult:
        total = selected_total(transactions)
        difference = None
        if statement_balance is not None:
            difference = statement_difference(statement_balance, current_balance, total)
        return ReconciliationResult(
            reconciled=reconciled,
            selected_total=total,
            statement_balance=statement_balance,
            statement_date=statement_date,
            difference=difference,
        )
