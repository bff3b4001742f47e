"""Nedbank statement parser.

Nedbank exports typically look like:
    Transaction Date, Value Date, Transaction Description, Debit, Credit, Balance

Some exports use a single signed Amount column instead of Debit/Credit.
"""

from typing import Optional, Sequence

from bankrec.parsers.base import BankParser, ColumnLayout, find_column, lower_headers


class NedbankParser(BankParser):
    """Parser for Nedbank CSV exports."""

    bank_id = "nedbank"
    name = "Nedbank"
    bank_name = "Nedbank"
    name_markers = ("nedbank",)

    missing_columns_message = "Could not identify required columns"

    def detect(self, content: str, headers: Sequence[str]) -> bool:
        if self.mentions_bank(content):
            return True
        lowered = lower_headers(headers)
        if find_column(lowered, "debit") is not None and find_column(lowered, "credit") is not None:
            return True
        return (
            find_column(lowered, "value date") is not None
            and find_column(lowered, "transaction date") is not None
        )

    def is_header_line(self, lower_line: str) -> bool:
        return ("date" in lower_line and "description" in lower_line) or (
            "debit" in lower_line and "credit" in lower_line
        )

    def resolve_columns(self, headers: list[str]) -> Optional[ColumnLayout]:
        date = find_column(headers, "date")
        description = find_column(headers, "description")
        debit = find_column(headers, "debit")
        credit = find_column(headers, "credit")
        amount = find_column(headers, "amount")

        uses_debit_credit = debit is not None and credit is not None
        if date is None or description is None or (not uses_debit_credit and amount is None):
            return None

        return ColumnLayout(
            date=date,
            description=description,
            amount=None if uses_debit_credit else amount,
            credit=credit if uses_debit_credit else None,
            debit=debit if uses_debit_credit else None,
            balance=find_column(headers, "balance"),
            reference=find_column(headers, "reference"),
        )
