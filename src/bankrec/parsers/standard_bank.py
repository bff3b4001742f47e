"""Standard Bank statement parser.

Standard Bank exports typically look like one of:
    Date, Description, Amount, Balance
    Acc No, Date, Description, Amount, Balance

This is also the most generic layout, so the parser doubles as the fallback
for files no other parser claims.
"""

from typing import Optional, Sequence

from bankrec.parsers.base import BankParser, ColumnLayout, count_matches, find_column, lower_headers


class StandardBankParser(BankParser):
    """Parser for Standard Bank CSV exports and generic statements."""

    bank_id = "standard-bank"
    name = "Standard Bank"
    bank_name = "Standard Bank"
    name_markers = ("standard bank", "standardbank")

    generic_patterns = ("date", "description", "amount", "balance")

    def detect(self, content: str, headers: Sequence[str]) -> bool:
        if self.mentions_bank(content):
            return True
        lowered = lower_headers(headers)
        if any("acc no" in h or h == "acc" for h in lowered):
            return True
        return count_matches(lowered, self.generic_patterns) == len(self.generic_patterns)

    def is_header_line(self, lower_line: str) -> bool:
        return "date" in lower_line and "description" in lower_line and "amount" in lower_line

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
            reference=find_column(headers, "reference"),
            account=find_column(headers, "acc"),
        )
