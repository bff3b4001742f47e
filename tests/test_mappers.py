"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from bankrec.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)
from bankrec.database.mappers import (
    account_to_domain,
    category_to_domain,
    transaction_to_domain,
)
from bankrec.domain.entities import Account, Category, Transaction, TransactionDirection


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_account_to_domain(self):
        """Test converting ORM Account to domain Account."""
        orm_account = ORMAccount(
            id=1,
            name="Cheque",
            bank_name="FNB",
            account_number="62812345678",
            currency="ZAR",
            current_balance=Decimal("12000.00"),
            created_at=datetime.now(UTC),
        )
        domain_account = account_to_domain(orm_account)

        assert isinstance(domain_account, Account)
        assert domain_account.id == 1
        assert domain_account.account_number == "62812345678"
        assert domain_account.current_balance == Decimal("12000.00")
        assert domain_account.created_at == orm_account.created_at

    def test_unset_balance_maps_to_zero(self):
        orm_account = ORMAccount(id=2, name="New", bank_name="ABSA", currency="ZAR", created_at=datetime.now(UTC))
        assert account_to_domain(orm_account).current_balance == Decimal("0")


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_to_domain(self):
        """Test converting ORM Category to domain Category."""
        orm_category = ORMCategory(id=1, name="Groceries", created_at=datetime.now(UTC))
        domain_category = category_to_domain(orm_category)

        assert isinstance(domain_category, Category)
        assert domain_category.name == "Groceries"


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Test converting ORM Transaction to domain Transaction."""
        imported_at = datetime.now(UTC)
        orm_transaction = ORMTransaction(
            id=7,
            account_id=1,
            date=date(2024, 1, 15),
            description="Woolworths",
            amount=Decimal("450.00"),
            direction=TransactionDirection.EXPENSE,
            reference=None,
            category_id=None,
            is_reconciled=False,
            reconciled_at=None,
            imported_at=imported_at,
        )
        domain_transaction = transaction_to_domain(orm_transaction)

        assert isinstance(domain_transaction, Transaction)
        assert domain_transaction.amount == Decimal("450.00")
        assert domain_transaction.direction is TransactionDirection.EXPENSE
        assert domain_transaction.signed_amount == Decimal("-450.00")
        assert domain_transaction.is_reconciled is False
        assert domain_transaction.imported_at == imported_at
