"""Common interface and shared machinery for bank statement parsers.

Each bank parser owns two decisions: whether a file looks like its export
(``detect``) and how to read it (``parse``). Reading follows the same shape
for every bank: find the header row within the first lines, resolve columns
by fuzzy header names, then turn every following line into exactly one row
outcome (a transaction, a row error, or a silent skip).
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from bankrec.domain.entities import ParsedTransaction, ParseResult, TransactionDirection
from bankrec.parsers.tokenizer import split_csv_line, split_lines
from bankrec.utils.amount_parser import parse_statement_amount
from bankrec.utils.date_parser import parse_statement_date

logger = logging.getLogger(__name__)

# The header row must appear within this many non-blank lines
HEADER_SCAN_LIMIT = 10

ACCOUNT_NUMBER_PATTERN = re.compile(r"\d{10,}")

STATEMENT_CURRENCY = "ZAR"


@dataclass(frozen=True)
class ColumnLayout:
    """Resolved column positions for one statement file.

    ``credit``/``debit`` hold the money-in/money-out (or credit/debit) pair
    when the file splits amounts by direction; ``amount`` holds the single
    signed amount column otherwise.
    """

    date: int
    description: int
    amount: Optional[int] = None
    credit: Optional[int] = None
    debit: Optional[int] = None
    balance: Optional[int] = None
    reference: Optional[int] = None
    account: Optional[int] = None

    @property
    def is_split(self) -> bool:
        return self.credit is not None and self.debit is not None

    @property
    def required_width(self) -> int:
        """Minimum number of cells a row needs to be considered at all."""
        required = [self.date, self.description]
        if not self.is_split and self.amount is not None:
            required.append(self.amount)
        return max(required) + 1


@dataclass(frozen=True)
class RowOutcome:
    """Result of reading one data row; empty means the row is skipped."""

    transaction: Optional[ParsedTransaction] = None
    error: Optional[str] = None


SKIP = RowOutcome()


def lower_headers(headers: Sequence[str]) -> list[str]:
    """Normalize header cells for substring matching."""
    return [header.lower().strip() for header in headers]


def find_column(headers: Sequence[str], *tokens: str) -> Optional[int]:
    """Return the index of the first header containing any of the tokens."""
    for index, header in enumerate(headers):
        if any(token in header for token in tokens):
            return index
    return None


def count_matches(headers: Sequence[str], patterns: Sequence[str]) -> int:
    """Count how many patterns appear in at least one header."""
    return sum(1 for pattern in patterns if any(pattern in h for h in headers))


def _cell(values: Sequence[str], index: Optional[int]) -> str:
    if index is None or index >= len(values):
        return ""
    return values[index]


def _optional_amount(values: Sequence[str], index: Optional[int]) -> Optional[Decimal]:
    text = _cell(values, index)
    if not text:
        return None
    try:
        return parse_statement_amount(text)
    except ValueError:
        return None


class BankParser(ABC):
    """Detection and parsing strategy for one bank's CSV export."""

    #: Identifier accepted when the user names the bank explicitly
    bank_id: str
    #: Display name, e.g. for listings of supported banks
    name: str
    #: Bank name reported on parse results
    bank_name: str
    #: Lower-case literals whose presence in a file names this bank
    name_markers: tuple[str, ...] = ()

    missing_columns_message = "Could not identify required columns (date, description, amount)"

    def mentions_bank(self, content: str) -> bool:
        """Return True if the file literally names this bank."""
        lower_content = content.lower()
        return any(marker in lower_content for marker in self.name_markers)

    @abstractmethod
    def detect(self, content: str, headers: Sequence[str]) -> bool:
        """Return True if this parser should own the file.

        Args:
            content: Full file text
            headers: Cells of one candidate header row
        """

    @abstractmethod
    def is_header_line(self, lower_line: str) -> bool:
        """Return True if a lower-cased raw line is this bank's header row."""

    @abstractmethod
    def resolve_columns(self, headers: list[str]) -> Optional[ColumnLayout]:
        """Map lower-cased header cells to column positions.

        Returns None when a required column cannot be found.
        """

    def is_account_banner(self, lower_line: str) -> bool:
        """Return True if a preamble line may carry the account number."""
        return "date" not in lower_line

    def parse(self, content: str) -> ParseResult:
        """Parse a statement export into transactions and row errors.

        A batch with some bad rows is still successful as long as at least
        one transaction was extracted.

        Args:
            content: Full file text

        Returns:
            ParseResult for this bank
        """
        lines = split_lines(content)
        if len(lines) < 2:
            return self._failure("File appears to be empty or has insufficient data")

        header_index, account_number = self._locate_header(lines)
        layout = self.resolve_columns(lower_headers(split_csv_line(lines[header_index])))
        if layout is None:
            return self._failure(self.missing_columns_message)

        transactions: list[ParsedTransaction] = []
        errors: list[str] = []
        for index in range(header_index + 1, len(lines)):
            values = split_csv_line(lines[index])
            if account_number is None and layout.account is not None:
                account_number = self._find_account_number(_cell(values, layout.account))

            outcome = self.extract_row(values, layout, row_number=index + 1)
            if outcome.transaction is not None:
                transactions.append(outcome.transaction)
            elif outcome.error is not None:
                errors.append(outcome.error)

        if not transactions:
            logger.warning("%s parser extracted no transactions (%d row errors)", self.bank_name, len(errors))

        return ParseResult(
            success=bool(transactions),
            transactions=tuple(transactions),
            errors=tuple(errors),
            bank_name=self.bank_name,
            account_number=account_number,
            currency=STATEMENT_CURRENCY,
        )

    def extract_row(self, values: Sequence[str], layout: ColumnLayout, row_number: int) -> RowOutcome:
        """Turn one tokenized data row into a row outcome.

        Args:
            values: Cells of the row
            layout: Resolved column positions
            row_number: 1-based position of the row among non-blank lines

        Returns:
            RowOutcome carrying a transaction, an error, or neither (skip)
        """
        if len(values) < layout.required_width:
            return SKIP

        date_text = values[layout.date]
        if not date_text:
            return SKIP

        description = values[layout.description]
        if not description:
            return RowOutcome(error=f"Row {row_number}: Missing description")

        txn_date = parse_statement_date(date_text)
        if txn_date is None:
            return RowOutcome(error=f'Row {row_number}: Invalid date format "{date_text}"')

        if layout.is_split:
            credit = abs(_optional_amount(values, layout.credit) or Decimal("0"))
            debit = abs(_optional_amount(values, layout.debit) or Decimal("0"))
            if credit > 0:
                amount, direction = credit, TransactionDirection.INCOME
            elif debit > 0:
                amount, direction = debit, TransactionDirection.EXPENSE
            else:
                return SKIP
        else:
            amount_text = _cell(values, layout.amount)
            if not amount_text:
                return RowOutcome(error=f"Row {row_number}: Missing amount")
            try:
                signed = parse_statement_amount(amount_text)
            except ValueError:
                return RowOutcome(error=f'Row {row_number}: Invalid amount "{amount_text}"')
            direction = TransactionDirection.INCOME if signed >= 0 else TransactionDirection.EXPENSE
            amount = abs(signed)

        return RowOutcome(
            transaction=ParsedTransaction(
                date=txn_date,
                description=description,
                amount=amount,
                direction=direction,
                reference=_cell(values, layout.reference) or None,
                balance=_optional_amount(values, layout.balance),
            )
        )

    def _locate_header(self, lines: Sequence[str]) -> tuple[int, Optional[str]]:
        """Find the header row, picking up an account number on the way.

        Falls back to the first line when no header is recognized.
        """
        account_number = None
        for index, line in enumerate(lines[:HEADER_SCAN_LIMIT]):
            lower_line = line.lower()
            if self.is_header_line(lower_line):
                return index, account_number
            if self.is_account_banner(lower_line):
                account_number = self._find_account_number(line) or account_number
        return 0, account_number

    @staticmethod
    def _find_account_number(text: str) -> Optional[str]:
        match = ACCOUNT_NUMBER_PATTERN.search(text)
        return match.group(0) if match else None

    def _failure(self, message: str) -> ParseResult:
        logger.warning("%s parser rejected file: %s", self.bank_name, message)
        return ParseResult(success=False, errors=(message,), bank_name=self.bank_name)
