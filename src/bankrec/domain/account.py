"""Account domain service."""

from decimal import Decimal
from typing import Optional
from bankrec.database.base import Database
from bankrec.domain.entities import Account as AccountEntity
from bankrec.domain.errors import ConflictError, ValidationError, account_name_taken


class AccountService:
    """Service for managing bank accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        bank_name: str,
        account_number: Optional[str] = None,
        currency: str = "ZAR",
        opening_balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a new bank account.

        Args:
            name: Account name
            bank_name: Bank name
            account_number: Optional bank account number
            currency: ISO currency code
            opening_balance: Balance before any ledger transactions

        Returns:
            Account ID

        Raises:
            ConflictError: If account name already exists
            ValidationError: If the currency code is malformed
        """
        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(account_name_taken(name))

        currency = currency.strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise ValidationError(f"Invalid currency code '{currency}'")

        return self.db.create_account(
            name=name,
            bank_name=bank_name,
            account_number=account_number,
            currency=currency,
            opening_balance=opening_balance,
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()
