"""Tests for account, category and manual transaction services."""

import pytest
from datetime import date
from decimal import Decimal

from bankrec.domain.entities import TransactionDirection
from bankrec.domain.errors import ConflictError, NotFoundError, ValidationError
from bankrec.utils.account_resolver import resolve_account


class TestAccountService:
    """Tests for AccountService."""

    def test_create_account_defaults(self, account_service):
        account_id = account_service.create_account(name="Cheque", bank_name="FNB")
        account = account_service.get_account(account_id)

        assert account.name == "Cheque"
        assert account.currency == "ZAR"
        assert account.current_balance == Decimal("0")
        assert account.account_number is None

    def test_create_account_with_opening_balance(self, sample_account):
        assert sample_account.current_balance == Decimal("10000.00")
        assert sample_account.account_number == "62812345678"

    def test_duplicate_name(self, account_service, sample_account):
        with pytest.raises(ConflictError, match="already exists"):
            account_service.create_account(name="Test Account", bank_name="Other")

    def test_currency_normalized(self, account_service):
        account_id = account_service.create_account(name="Travel", bank_name="Capitec", currency=" usd ")
        assert account_service.get_account(account_id).currency == "USD"

    @pytest.mark.parametrize("currency", ["RAND", "R1", ""])
    def test_invalid_currency(self, account_service, currency):
        with pytest.raises(ValidationError, match="Invalid currency code"):
            account_service.create_account(name="Bad", bank_name="Bank", currency=currency)

    def test_list_accounts_sorted_by_name(self, account_service):
        account_service.create_account(name="Savings", bank_name="ABSA")
        account_service.create_account(name="Cheque", bank_name="FNB")
        assert [a.name for a in account_service.list_accounts()] == ["Cheque", "Savings"]


class TestResolveAccount:
    """Tests for account name/ID resolution."""

    def test_resolve_by_id(self, account_service, sample_account):
        assert resolve_account(account_service, sample_account.id) == sample_account.id
        assert resolve_account(account_service, str(sample_account.id)) == sample_account.id

    def test_resolve_by_name(self, account_service, sample_account):
        assert resolve_account(account_service, "Test Account") == sample_account.id

    def test_unknown_id(self, account_service):
        with pytest.raises(NotFoundError, match="Account ID 42 not found"):
            resolve_account(account_service, "42")

    def test_unknown_name(self, account_service):
        with pytest.raises(NotFoundError, match="Account 'Nope' not found"):
            resolve_account(account_service, "Nope")


class TestCategoryService:
    """Tests for CategoryService."""

    def test_create_and_lookup(self, category_service):
        category_id = category_service.create_category("  Groceries ")
        assert category_service.get_category(category_id).name == "Groceries"
        assert category_service.require_category_by_name("Groceries").id == category_id

    def test_blank_name(self, category_service):
        with pytest.raises(ValidationError):
            category_service.create_category("   ")

    def test_duplicate_name(self, category_service):
        category_service.create_category("Fuel")
        with pytest.raises(ConflictError):
            category_service.create_category("Fuel")

    def test_missing_by_name(self, category_service):
        with pytest.raises(NotFoundError, match="Category 'Travel' not found"):
            category_service.require_category_by_name("Travel")


class TestTransactionService:
    """Tests for manual ledger entries."""

    def test_create_expense_adjusts_balance(self, transaction_service, account_service, sample_account):
        txn_id = transaction_service.create_transaction(
            account_id=sample_account.id,
            date=date(2024, 1, 15),
            description="  Fuel ",
            amount=Decimal("800.00"),
            direction=TransactionDirection.EXPENSE,
            reference="POS123",
        )

        txn = transaction_service.get_transaction(txn_id)
        assert txn.description == "Fuel"
        assert txn.signed_amount == Decimal("-800.00")
        assert txn.reference == "POS123"
        assert not txn.is_reconciled
        assert account_service.get_account(sample_account.id).current_balance == Decimal("9200.00")

    def test_create_income(self, transaction_service, account_service, sample_account):
        transaction_service.create_transaction(
            account_id=sample_account.id,
            date=date(2024, 1, 15),
            description="Salary",
            amount=Decimal("100.00"),
            direction=TransactionDirection.INCOME,
        )
        assert account_service.get_account(sample_account.id).current_balance == Decimal("10100.00")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5.00")])
    def test_rejects_non_positive_amount(self, transaction_service, sample_account, amount):
        with pytest.raises(ValidationError, match="Amount must be greater than 0"):
            transaction_service.create_transaction(
                account_id=sample_account.id,
                date=date(2024, 1, 15),
                description="Bad",
                amount=amount,
                direction=TransactionDirection.EXPENSE,
            )

    def test_rejects_blank_description(self, transaction_service, sample_account):
        with pytest.raises(ValidationError, match="Description is required"):
            transaction_service.create_transaction(
                account_id=sample_account.id,
                date=date(2024, 1, 15),
                description=" ",
                amount=Decimal("1.00"),
                direction=TransactionDirection.EXPENSE,
            )

    def test_unknown_account(self, transaction_service):
        with pytest.raises(NotFoundError):
            transaction_service.create_transaction(
                account_id=123,
                date=date(2024, 1, 15),
                description="x",
                amount=Decimal("1.00"),
                direction=TransactionDirection.EXPENSE,
            )

    def test_unknown_category(self, transaction_service, sample_account):
        with pytest.raises(NotFoundError, match="Category 7 not found"):
            transaction_service.create_transaction(
                account_id=sample_account.id,
                date=date(2024, 1, 15),
                description="x",
                amount=Decimal("1.00"),
                direction=TransactionDirection.EXPENSE,
                category_id=7,
            )

    def test_list_filters(self, transaction_service, reconciliation_service, sample_account, other_account):
        ids = []
        for account, day in ((sample_account, 1), (sample_account, 2), (other_account, 3)):
            ids.append(
                transaction_service.create_transaction(
                    account_id=account.id,
                    date=date(2024, 1, day),
                    description=f"Txn {day}",
                    amount=Decimal("10.00"),
                    direction=TransactionDirection.EXPENSE,
                )
            )
        reconciliation_service.reconcile([ids[0]], sample_account.id)

        own = transaction_service.list_transactions(account_id=sample_account.id)
        assert [t.id for t in own] == [ids[1], ids[0]]

        open_items = transaction_service.list_transactions(account_id=sample_account.id, reconciled=False)
        assert [t.id for t in open_items] == [ids[1]]

        in_range = transaction_service.list_transactions(start_date=date(2024, 1, 2), end_date=date(2024, 1, 2))
        assert [t.id for t in in_range] == [ids[1]]
