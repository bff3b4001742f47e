"""Bank statement import domain service."""

import logging
from decimal import Decimal
from typing import Optional, Union

from bankrec.database.base import Database
from bankrec.domain.entities import (
    ImportResult,
    ParsedTransaction,
    ParseResult,
    Transaction,
)
from bankrec.domain.errors import (
    NotFoundError,
    StatementParseError,
    ValidationError,
    account_not_found,
    category_not_found,
)
from bankrec.parsers.detector import parse_statement, parse_statement_with_bank
from bankrec.utils.amount_parser import round_to_cents

logger = logging.getLogger(__name__)


def duplicate_key(
    txn: Union[ParsedTransaction, Transaction], match_description: bool = False
) -> tuple:
    """Build the key under which two transactions count as the same.

    The key is (date, amount rounded to cents, direction). Bank re-exports
    often reformat descriptions, so the description only joins the key when
    ``match_description`` is set.
    """
    key: tuple = (txn.date, round_to_cents(txn.amount), txn.direction)
    if match_description:
        key += (txn.description.strip(),)
    return key


class StatementImportService:
    """Service for importing bank statement CSV exports into the ledger."""

    def __init__(self, db: Database):
        """Initialize statement import service.

        Args:
            db: Database instance
        """
        self.db = db

    def preview_statement(self, csv_content: str, bank_name: Optional[str] = None) -> ParseResult:
        """Parse a statement without touching the ledger.

        Args:
            csv_content: Full CSV text
            bank_name: Optional bank identifier that skips detection

        Returns:
            ParseResult of the statement
        """
        if bank_name:
            return parse_statement_with_bank(csv_content, bank_name)
        return parse_statement(csv_content)

    def import_statement(
        self,
        csv_content: str,
        account_id: int,
        bank_name: Optional[str] = None,
        category_id: Optional[int] = None,
        skip_duplicates: bool = True,
        match_description: bool = False,
    ) -> ImportResult:
        """Import a statement's transactions into a bank account.

        Duplicate checking and insertion happen in one database transaction
        with the account row locked, so a concurrent import into the same
        account cannot slip identical rows past the check. Either every
        accepted transaction is inserted or none is.

        Args:
            csv_content: Full CSV text
            account_id: Target bank account ID
            bank_name: Optional bank identifier that skips detection
            category_id: Optional category applied to every imported row
            skip_duplicates: If True, rows matching an existing ledger row are
                counted as duplicates instead of inserted
            match_description: If True, descriptions must also match for a
                row to count as a duplicate

        Returns:
            ImportResult with imported and duplicate counts

        Raises:
            ValidationError: If the content is blank
            NotFoundError: If account or category doesn't exist
            StatementParseError: If no transactions could be parsed
        """
        if not csv_content or not csv_content.strip():
            raise ValidationError("CSV content is required")

        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        parsed = self.preview_statement(csv_content, bank_name)
        if not parsed.success:
            raise StatementParseError(parsed.errors, parsed.bank_name)

        with self.db.atomic():
            self.db.lock_account(account_id)

            existing_keys = set()
            if skip_duplicates:
                existing = self.db.find_transactions_on_dates(
                    account_id, {txn.date for txn in parsed.transactions}
                )
                existing_keys = {duplicate_key(txn, match_description) for txn in existing}

            to_insert = []
            duplicates = 0
            for txn in parsed.transactions:
                if skip_duplicates and duplicate_key(txn, match_description) in existing_keys:
                    duplicates += 1
                    continue
                to_insert.append(txn)

            imported = 0
            if to_insert:
                imported = self.db.add_transactions(account_id, to_insert, category_id=category_id)
                self.db.adjust_account_balance(
                    account_id, sum((txn.signed_amount for txn in to_insert), Decimal("0"))
                )

        logger.info(
            "Imported %d %s transactions into account %d (%d duplicates skipped, %d row errors)",
            imported,
            parsed.bank_name,
            account_id,
            duplicates,
            len(parsed.errors),
        )

        if imported:
            message = f"Successfully imported {imported} transactions"
        else:
            message = "No new transactions to import"

        return ImportResult(
            imported=imported,
            duplicates=duplicates,
            message=message,
            bank_name=parsed.bank_name,
            parse_errors=parsed.errors,
        )
