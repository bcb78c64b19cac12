"""Delimited text import/export for ledger entries.

The format is UTF-8, comma-delimited, with a mandatory header row and nine
fixed columns. Values containing a quote, the delimiter or a line break are
wrapped in double quotes with embedded quotes doubled.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from cashbook.domain.entities import (
    Entry,
    EntryKind,
    EntryStatus,
    FIXED_COST,
    new_entry_id,
)
from cashbook.domain.errors import MalformedRecordError, wrong_field_count
from cashbook.domain.validation import (
    parse_due_date,
    parse_kind,
    parse_positive_amount,
    parse_status,
    require_text,
)

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'

COLUMNS = (
    "id",
    "dueDate",
    "description",
    "note",
    "category",
    "kind",
    "amount",
    "status",
    "barcode",
)

TEMPLATE_ROW = (
    "",
    "2025-01-15",
    "Example - Electricity Bill",
    "Example note",
    FIXED_COST,
    EntryKind.EXPENSE.value,
    "150.00",
    EntryStatus.OPEN.value,
    "",
)


class FieldState(Enum):
    """Scanner state while splitting a record into fields."""

    NORMAL = "normal"
    IN_QUOTES = "in_quotes"


def split_record(line: str) -> list[str]:
    """Split one record line into raw field values.

    A quote toggles the quoted state. Inside quotes, a doubled quote yields
    one literal quote and the delimiter is ordinary text. An unterminated
    quote runs to the end of the line.
    """
    fields: list[str] = []
    current: list[str] = []
    state = FieldState.NORMAL
    i = 0

    while i < len(line):
        char = line[i]
        if state is FieldState.IN_QUOTES:
            if char == QUOTE:
                if i + 1 < len(line) and line[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 1
                else:
                    state = FieldState.NORMAL
            else:
                current.append(char)
        elif char == QUOTE:
            state = FieldState.IN_QUOTES
        elif char == DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def quote_field(value: str) -> str:
    """Quote a field value when it would otherwise be ambiguous."""
    if any(char in value for char in (QUOTE, DELIMITER, "\n", "\r")):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def join_record(values: Iterable[str]) -> str:
    return DELIMITER.join(quote_field(value) for value in values)


def entry_to_fields(entry: Entry) -> tuple[str, ...]:
    """Render an entry as the nine column values, in column order."""
    return (
        entry.id,
        entry.due_date.isoformat() if entry.due_date else "",
        entry.description,
        entry.note or "",
        entry.category,
        entry.kind.value,
        format(entry.amount, "f"),
        entry.status.value,
        entry.barcode or "",
    )


def encode(entries: Iterable[Entry]) -> str:
    """Encode entries as delimited text with a header line."""
    lines = [DELIMITER.join(COLUMNS)]
    lines.extend(join_record(entry_to_fields(entry)) for entry in entries)
    return "\n".join(lines)


def fields_to_entry(fields: list[str], line: int) -> Entry:
    """Validate one record's fields and build an entry.

    Raises:
        MalformedRecordError: If there are fewer than nine fields
        ValidationError: If a field value is invalid
    """
    if len(fields) < len(COLUMNS):
        raise MalformedRecordError(
            wrong_field_count(len(COLUMNS), len(fields)), line=line
        )

    (
        entry_id,
        due_date,
        description,
        note,
        category,
        kind,
        amount,
        status,
        barcode,
    ) = fields[: len(COLUMNS)]

    description = require_text(description, "description", line)
    category = require_text(category, "category", line)
    parsed_kind = parse_kind(kind, line)
    parsed_status = parse_status(status, line)
    parsed_amount = parse_positive_amount(amount, line)
    parsed_due_date = parse_due_date(due_date, line)

    return Entry(
        id=entry_id.strip() or new_entry_id(),
        due_date=parsed_due_date,
        description=description,
        note=note,
        category=category,
        kind=parsed_kind,
        amount=parsed_amount,
        status=parsed_status,
        barcode=barcode or None,
    )


def decode(text: str) -> list[Entry]:
    """Decode delimited text into entries.

    The first non-blank line is the header and is never validated. Line
    numbers in errors count non-blank lines, starting with the header as 1.
    Decoding is all-or-nothing: the first bad line aborts the whole decode.
    Fields past the ninth are ignored.

    Raises:
        MalformedRecordError: If there are no data rows or a row has
            fewer than nine fields
        ValidationError: If a field value is invalid
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = [line.rstrip("\r") for line in text.split("\n")]
    lines = [line for line in lines if line.strip()]

    if len(lines) < 2:
        raise MalformedRecordError("no data rows")

    entries = []
    for line_number, line in enumerate(lines[1:], start=2):
        try:
            entries.append(fields_to_entry(split_record(line), line_number))
        except ValueError as e:
            logger.warning("Rejected record text: %s", e)
            raise
    return entries


def template_text() -> str:
    """Return the header line plus one example row."""
    return "\n".join([DELIMITER.join(COLUMNS), join_record(TEMPLATE_ROW)])


def export_file(entries: Iterable[Entry], path: str) -> Path:
    """Write encoded entries to a file.

    Returns:
        Path of the written file
    """
    target = Path(path)
    target.write_text(encode(entries), encoding="utf-8")
    return target


def import_file(path: str) -> list[Entry]:
    """Read and decode a record file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedRecordError: If the content is not UTF-8 text or is
            structurally invalid
        ValidationError: If a field value is invalid
    """
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Record file not found: {path}")
    try:
        text = source.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Rejected record file %s: %s", path, e)
        raise MalformedRecordError("file is not valid UTF-8") from e
    return decode(text)


def write_template(path: Optional[str] = None) -> Path:
    target = Path(path or "cashbook-template.csv")
    target.write_text(template_text(), encoding="utf-8")
    return target
