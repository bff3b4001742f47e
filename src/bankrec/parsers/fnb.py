"""FNB (First National Bank) statement parser.

FNB exports typically look like one of:
    Date, Description, Amount, Balance
    Account Number, Posting Date, Description, Amount, Balance, Accrued Charges

Amounts are a single signed column; a banner line naming the account may
precede the header.
"""

from typing import Optional, Sequence

from bankrec.parsers.base import BankParser, ColumnLayout, count_matches, find_column, lower_headers


class FNBParser(BankParser):
    """Parser for FNB CSV exports."""

    bank_id = "fnb"
    name = "FNB (First National Bank)"
    bank_name = "FNB"
    name_markers = ("fnb", "first national bank")

    header_patterns = ("account number", "posting date", "description", "amount", "balance")

    def detect(self, content: str, headers: Sequence[str]) -> bool:
        if self.mentions_bank(content):
            return True
        return count_matches(lower_headers(headers), self.header_patterns) >= 3

    def is_header_line(self, lower_line: str) -> bool:
        return (
            "date" in lower_line and "description" in lower_line and "amount" in lower_line
        ) or ("posting date" in lower_line and "balance" in lower_line)

    def is_account_banner(self, lower_line: str) -> bool:
        return "account" in lower_line

    def resolve_columns(self, headers: list[str]) -> Optional[ColumnLayout]:
        date = find_column(headers, "date")
        description = find_column(headers, "description", "narrative")
        amount = find_column(headers, "amount", "money in/out")
        if date is None or description is None or amount is None:
            return None
        return ColumnLayout(
            date=date,
            description=description,
            amount=amount,
            balance=find_column(headers, "balance"),
            reference=find_column(headers, "reference"),
        )
