"""Bank format detection and dispatch.

Parsers are tried in a fixed order, most distinctive signature first and the
generic layout last, so that a generic-looking file is never attributed to a
specific bank and read with the wrong column semantics.
"""

import logging
import re
from typing import Optional
from dataclasses import replace

from bankrec.domain.entities import ParseResult
from bankrec.parsers.absa import ABSAParser
from bankrec.parsers.base import BankParser
from bankrec.parsers.capitec import CapitecParser
from bankrec.parsers.fnb import FNBParser
from bankrec.parsers.nedbank import NedbankParser
from bankrec.parsers.standard_bank import StandardBankParser
from bankrec.parsers.tokenizer import split_csv_line, split_lines

logger = logging.getLogger(__name__)

# Number of leading non-blank lines offered to parsers as header candidates
HEADER_CANDIDATES = 5

GENERIC_BANK_NAME = "Unknown (Generic)"

GENERIC_PARSER = StandardBankParser()

PARSERS: tuple[BankParser, ...] = (
    FNBParser(),
    ABSAParser(),
    NedbankParser(),
    CapitecParser(),
    GENERIC_PARSER,
)

_PARSERS_BY_ID: dict[str, BankParser] = {parser.bank_id: parser for parser in PARSERS}
_PARSERS_BY_ID["standardbank"] = GENERIC_PARSER


def parse_statement(content: str) -> ParseResult:
    """Detect the bank behind a CSV export and parse it.

    Args:
        content: Full file text

    Returns:
        ParseResult from the first parser that claims the file and extracts
        at least one transaction, else from the generic fallback, else a
        failure telling the user the file is not a recognizable statement
    """
    if not content.strip():
        return ParseResult(success=False, errors=("File is empty",))

    lines = split_lines(content)
    if len(lines) < 2:
        return ParseResult(success=False, errors=("File has insufficient data",))

    candidates = [split_csv_line(line) for line in lines[:HEADER_CANDIDATES]]

    # A file that names its bank goes to that bank, whatever its headers look like
    for parser in PARSERS:
        if parser.mentions_bank(content):
            result = parser.parse(content)
            if result.success:
                logger.info("Detected %s statement by name", parser.bank_name)
                return result

    for parser in PARSERS:
        if any(parser.detect(content, headers) for headers in candidates):
            result = parser.parse(content)
            if result.success:
                logger.info("Detected %s statement by header layout", parser.bank_name)
                return result

    generic = GENERIC_PARSER.parse(content)
    if generic.success:
        logger.info("No bank detected; parsed with the generic layout")
        return replace(generic, bank_name=GENERIC_BANK_NAME)

    logger.warning("No parser could read the uploaded statement")
    return ParseResult(
        success=False,
        errors=("Could not parse file. Please ensure it is a valid bank statement CSV.",),
    )


def parse_statement_with_bank(content: str, bank: str) -> ParseResult:
    """Parse a CSV export with an explicitly chosen bank parser.

    Args:
        content: Full file text
        bank: Bank identifier such as "fnb" or "Standard Bank"

    Returns:
        ParseResult from that bank's parser, or a failure for an unknown bank
    """
    parser = get_parser(bank)
    if parser is None:
        return ParseResult(success=False, errors=(f"Unknown bank: {bank}",), bank_name=bank)
    return parser.parse(content)


def get_parser(bank: str) -> Optional[BankParser]:
    """Look up a parser by bank identifier, ignoring case and spacing."""
    key = re.sub(r"\s+", "-", bank.strip().lower())
    return _PARSERS_BY_ID.get(key)


def supported_banks() -> list[tuple[str, str]]:
    """Return (identifier, display name) pairs for every supported bank."""
    return [(parser.bank_id, parser.name) for parser in PARSERS]
