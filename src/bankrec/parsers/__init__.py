"""Bank statement CSV parsers."""

from bankrec.parsers.base import BankParser
from bankrec.parsers.detector import (
    PARSERS,
    parse_statement,
    parse_statement_with_bank,
    supported_banks,
)

__all__ = [
    "BankParser",
    "PARSERS",
    "parse_statement",
    "parse_statement_with_bank",
    "supported_banks",
]
