"""Tests for account commands."""

from bankrec.cli.main import cli


def test_account_create_with_bank(cli_runner, temp_db, monkeypatch):
    """Test creating an account with --bank option."""
    monkeypatch.setenv("BANKREC_DB_PATH", temp_db.database_path)

    result = cli_runner.invoke(cli, ["account", "create", "Cheque", "--bank", "FNB"])

    assert result.exit_code == 0
    assert "Created account 'Cheque'" in result.output
    assert "ID:" in result.output


def test_account_create_without_bank(cli_runner, temp_db):
    """Test creating an account without --bank option."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "create", "Capitec"])

    assert result.exit_code == 0
    assert "Created account 'Capitec'" in result.output
    assert "Bank name set to 'Capitec'" in result.output


def test_account_create_with_opening_balance(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "account",
            "create",
            "Savings",
            "--bank",
            "ABSA",
            "--opening-balance",
            "R 1,500.00",
        ],
    )
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])
    assert "Savings" in result.output
    assert "ZAR 1,500.00" in result.output


def test_account_create_invalid_currency(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "create", "Bad", "--currency", "RANDS"]
    )
    assert result.exit_code == 1
    assert "Invalid currency code" in result.output


def test_account_list_empty(cli_runner, temp_db):
    """Test listing accounts when none exist."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "No accounts found" in result.output


def test_account_list_with_data(cli_runner, temp_db, sample_account):
    """Test listing accounts with data."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "Test Account" in result.output
    assert "Test Bank" in result.output
    assert "10,000.00" in result.output


def test_account_create_duplicate(cli_runner, temp_db):
    """Test creating duplicate account name fails."""
    result1 = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "create", "Cheque", "--bank", "FNB"]
    )
    assert result1.exit_code == 0

    result2 = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "create", "Cheque", "--bank", "ABSA"]
    )
    assert result2.exit_code == 1
    assert "Error: Account with name 'Cheque' already exists" in result2.output
