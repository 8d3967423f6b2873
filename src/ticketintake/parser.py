"""Summary: Delimited-record parsing for support message exports.

Importance: Turns uploaded comma-separated text into ordered raw records.
Alternatives: Use the csv module with full RFC 4180 quoting rules.

Quoting is deliberately simple: a double quote toggles the "inside quotes"
state and is never emitted, so a doubled quote ("") is not unescaped.
"""

from __future__ import annotations

import logging

from ticketintake.models import REQUIRED_FIELDS, RawRecord


logger = logging.getLogger(__name__)


class ImportFailedError(ValueError):
    """Summary: Base error for whole-file import failures.

    Importance: Lets callers separate fatal file problems from row-level errors.
    Alternatives: Return an error report with zero tickets instead of raising.
    """


class MissingColumnsError(ImportFailedError):
    """Summary: Raised when the header lacks required columns."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required headers: {', '.join(self.missing)}")


class EmptyImportError(ImportFailedError):
    """Summary: Raised when no data rows survive parsing."""

    def __init__(self) -> None:
        super().__init__("No valid data found in CSV file")


def split_line(line: str) -> list[str]:
    """Summary: Split one line into raw field values.

    Importance: Allows quoted fields to contain embedded commas.
    Alternatives: Split on every comma and forbid commas inside fields.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


def parse_records(text: str) -> list[RawRecord]:
    """Summary: Parse delimited text into raw records.

    Importance: Validates the header once and keeps well-formed rows in input order.
    Alternatives: Reject the whole file when any row is malformed.

    Rows with the wrong field count or an empty required value are dropped
    silently; they never reach the importer.
    """

    # Spreadsheet exports often start with a byte order mark.
    lines = text.removeprefix("\ufeff").strip().split("\n")
    headers = [header.strip().lower() for header in split_line(lines[0])]
    missing = [name for name in REQUIRED_FIELDS if name not in headers]
    if missing:
        raise MissingColumnsError(missing)

    records: list[RawRecord] = []
    dropped = 0
    for line in lines[1:]:
        values = split_line(line)
        if len(values) != len(headers):
            dropped += 1
            continue
        row = {header: value.strip() for header, value in zip(headers, values)}
        if not all(row[name] for name in REQUIRED_FIELDS):
            dropped += 1
            continue
        records.append(
            RawRecord(
                sender=row["sender"],
                subject=row["subject"],
                body=row["body"],
                sent_date=row["sent_date"],
            )
        )
    if dropped:
        logger.debug("Dropped %s malformed rows while parsing.", dropped)
    return records
