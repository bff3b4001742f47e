"""Shared pytest fixtures for bankrec tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest

from bankrec.database.factories import create_sqlite_database
from bankrec.domain.account import AccountService
from bankrec.domain.category import CategoryService
from bankrec.domain.reconciliation import ReconciliationService
from bankrec.domain.statement_import import StatementImportService
from bankrec.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests that pass --db-path
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a StatementImportService with a temporary database."""
    return StatementImportService(temp_db)


@pytest.fixture
def reconciliation_service(temp_db):
    """Create a ReconciliationService with a temporary database."""
    return ReconciliationService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create a sample account with an opening balance."""
    account_id = account_service.create_account(
        name="Test Account",
        bank_name="Test Bank",
        account_number="62812345678",
        opening_balance=Decimal("10000.00"),
    )
    return account_service.get_account(account_id)


@pytest.fixture
def other_account(account_service):
    """Create a second account for cross-account checks."""
    account_id = account_service.create_account(name="Other Account", bank_name="Other Bank")
    return account_service.get_account(account_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def read_fixture(fixtures_dir):
    """Return a function reading a fixture file as text."""

    def _read(name: str) -> str:
        return (fixtures_dir / name).read_text(encoding="utf-8")

    return _read
