"""Tests for add and transaction commands."""

import pytest
from datetime import date
from decimal import Decimal

from bankrec.cli.main import cli
from bankrec.domain.entities import TransactionDirection


def test_add_transaction_signed_amount(cli_runner, temp_db, sample_account):
    """A negative amount without --direction is an expense."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--account",
            str(sample_account.id),
            "--date",
            "2024-01-15",
            "--amount",
            "-50.00",
            "--description",
            "Grocery store",
        ],
    )

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert "Test Account" in result.output
    assert "ZAR 50.00 (EXPENSE)" in result.output


def test_add_transaction_with_direction(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--account",
            "Test Account",
            "--date",
            "15/01/2024",
            "--amount",
            "1000",
            "--direction",
            "income",
            "--description",
            "Salary",
        ],
    )

    assert result.exit_code == 0
    assert "Date: 2024-01-15" in result.output
    assert "(INCOME)" in result.output


def test_add_transaction_zero_amount(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--account",
            "Test Account",
            "--date",
            "today",
            "--amount",
            "0",
            "--description",
            "Nothing",
        ],
    )

    assert result.exit_code == 1
    assert "Amount must be greater than 0" in result.output


def test_add_transaction_invalid_date(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--account",
            "Test Account",
            "--date",
            "not a date at all",
            "--amount",
            "5",
            "--description",
            "x",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_add_transaction_unknown_account(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--account",
            "Missing",
            "--date",
            "today",
            "--amount",
            "5",
            "--description",
            "x",
        ],
    )

    assert result.exit_code == 1
    assert "Account 'Missing' not found" in result.output


@pytest.fixture
def listed_transactions(transaction_service, reconciliation_service, sample_account):
    first = transaction_service.create_transaction(
        account_id=sample_account.id,
        date=date(2024, 1, 10),
        description="Old rent",
        amount=Decimal("1500.00"),
        direction=TransactionDirection.EXPENSE,
    )
    second = transaction_service.create_transaction(
        account_id=sample_account.id,
        date=date(2024, 1, 20),
        description="Open refund",
        amount=Decimal("40.00"),
        direction=TransactionDirection.INCOME,
    )
    reconciliation_service.reconcile([first], sample_account.id)
    return first, second


def test_transaction_list(cli_runner, temp_db, sample_account, listed_transactions):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "transaction", "list", "--account", "Test Account"]
    )

    assert result.exit_code == 0
    assert "Old rent" in result.output
    assert "-1,500.00" in result.output
    assert result.output.index("Open refund") < result.output.index("Old rent")


def test_transaction_list_unreconciled(cli_runner, temp_db, sample_account, listed_transactions):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "transaction", "list", "--account", "Test Account", "--unreconciled"],
    )

    assert result.exit_code == 0
    assert "Open refund" in result.output
    assert "Old rent" not in result.output


def test_transaction_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "transaction", "list"])
    assert "No transactions found" in result.output


def test_transaction_list_date_range(cli_runner, temp_db, sample_account, listed_transactions):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "transaction",
            "list",
            "--start-date",
            "2024-01-15",
            "--end-date",
            "31/01/2024",
        ],
    )

    assert result.exit_code == 0
    assert "Open refund" in result.output
    assert "Old rent" not in result.output


def test_transaction_list_invalid_start_date(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "transaction", "list", "--start-date", "not a date at all"]
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output
