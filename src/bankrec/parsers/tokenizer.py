"""CSV line tokenizing for bank statement exports."""

import csv
import re

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(content: str) -> list[str]:
    """Split raw file content into its non-blank lines.

    Args:
        content: Full file text

    Returns:
        Lines in file order, with blank and whitespace-only lines removed
    """
    return [line for line in _LINE_BREAK.split(content) if line.strip()]


def split_csv_line(line: str) -> list[str]:
    """Split one CSV record into trimmed field strings.

    Double-quoted fields may contain commas, and a doubled quote inside a
    quoted field stands for a literal quote. Malformed quoting never raises;
    the line is then split on every comma instead.

    Args:
        line: A single line of CSV text

    Returns:
        Ordered list of fields (at least one, possibly empty)
    """
    try:
        row = next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error:
        row = line.replace('"', "").split(",")

    if not row:
        return [""]
    return [field.strip() for field in row]
