"""Capitec statement parser.

Capitec exports typically look like one of:
    Date, Transaction Type, Description, Amount, Balance
    Transaction Date, Reference, Description, Money In, Money Out, Balance
"""

from typing import Optional, Sequence

from bankrec.parsers.base import BankParser, ColumnLayout, find_column, lower_headers


class CapitecParser(BankParser):
    """Parser for Capitec CSV exports."""

    bank_id = "capitec"
    name = "Capitec"
    bank_name = "Capitec"
    name_markers = ("capitec",)

    missing_columns_message = "Could not identify required columns"

    def detect(self, content: str, headers: Sequence[str]) -> bool:
        if self.mentions_bank(content):
            return True
        lowered = lower_headers(headers)
        if find_column(lowered, "money in") is not None and find_column(lowered, "money out") is not None:
            return True
        # Only Capitec labels a column "Transaction Type"
        return find_column(lowered, "transaction type") is not None

    def is_header_line(self, lower_line: str) -> bool:
        return ("date" in lower_line and "description" in lower_line) or (
            "money in" in lower_line and "money out" in lower_line
        )

    def resolve_columns(self, headers: list[str]) -> Optional[ColumnLayout]:
        date = find_column(headers, "date")
        description = find_column(headers, "description")
        money_in = find_column(headers, "money in")
        money_out = find_column(headers, "money out")
        amount = find_column(headers, "amount")

        uses_money_in_out = money_in is not None and money_out is not None
        if date is None or description is None or (not uses_money_in_out and amount is None):
            return None

        return ColumnLayout(
            date=date,
            description=description,
            amount=None if uses_money_in_out else amount,
            credit=money_in if uses_money_in_out else None,
            debit=money_out if uses_money_in_out else None,
            balance=find_column(headers, "balance"),
            reference=find_column(headers, "reference", "ref"),
        )
