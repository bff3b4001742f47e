"""ABSA statement parser.

ABSA exports typically look like:
    Account Number, Date, Reference Number, Description, Amount, Balance
"""

from typing import Optional, Sequence

from bankrec.parsers.base import BankParser, ColumnLayout, count_matches, find_column, lower_headers


class ABSAParser(BankParser):
    """Parser for ABSA CSV exports."""

    bank_id = "absa"
    name = "ABSA"
    bank_name = "ABSA"
    name_markers = ("absa",)

    header_patterns = ("statement date", "reference number", "description", "amount")

    def detect(self, content: str, headers: Sequence[str]) -> bool:
        if self.mentions_bank(content):
            return True
        lowered = lower_headers(headers)
        if find_column(lowered, "reference number") is not None:
            return True
        return count_matches(lowered, self.header_patterns) >= 3

    def is_header_line(self, lower_line: str) -> bool:
        return (
            "date" in lower_line and "description" in lower_line and "amount" in lower_line
        ) or "reference number" in lower_line

    def resolve_columns(self, headers: list[str]) -> Optional[ColumnLayout]:
        date = find_column(headers, "date")
        description = find_column(headers, "description")
        amount = find_column(headers, "amount")
        if date is None or description is None or amount is None:
            return None
        return ColumnLayout(
            date=date,
            description=description,
            amount=amount,
            balance=find_column(headers, "balance"),
            reference=find_column(headers, "reference", "ref"),
        )
