"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from bankrec.database.base import Database
from bankrec.domain.entities import Transaction as TransactionEntity, TransactionDirection
from bankrec.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    category_not_found,
)


class TransactionService:
    """Service for manual ledger entries and ledger queries."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

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
        """Create a transaction by manual entry.

        The account's current balance moves by the signed amount in the same
        database transaction as the insert.

        Args:
            account_id: Account ID
            date: Transaction date
            description: Description text
            amount: Positive magnitude
            direction: INCOME or EXPENSE
            reference: Optional reference
            category_id: Optional category ID

        Returns:
            Transaction ID

        Raises:
            ValidationError: If description is blank or amount is not positive
            NotFoundError: If account or category doesn't exist
        """
        description = description.strip()
        if not description:
            raise ValidationError("Description is required")
        if amount <= 0:
            raise ValidationError("Amount must be greater than 0")

        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        signed = amount if direction is TransactionDirection.INCOME else -amount
        with self.db.atomic():
            self.db.lock_account(account_id)
            transaction_id = self.db.create_transaction(
                account_id=account_id,
                date=date,
                description=description,
                amount=amount,
                direction=direction,
                reference=reference,
                category_id=category_id,
            )
            self.db.adjust_account_balance(account_id, signed)
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        account_id: Optional[int] = None,
        reconciled: Optional[bool] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters.

        Args:
            account_id: Optional account ID filter
            reconciled: Optional reconciliation state filter
            start_date: Optional start date filter
            end_date: Optional end date filter

        Returns:
            List of transaction entities, newest first
        """
        return self.db.list_transactions(
            account_id=account_id,
            reconciled=reconciled,
            start_date=start_date,
            end_date=end_date,
        )
