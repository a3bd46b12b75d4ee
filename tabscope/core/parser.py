"""
Delimited-text parser.

Turns raw text (header line + data lines) into a typed Table.
There is no quoting or escaping: a value containing the delimiter
shifts every following cell of that line.
"""

import logging
from typing import Dict, List, Optional, Tuple

from tabscope.core.models import Cell, Table
from tabscope.errors import ConfigError, MalformedInputError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","


def _unique_headers(raw: List[str]) -> Tuple[str, ...]:
    """
    Make header names unique the way pandas.read_csv does:
    blank names become ``Unnamed: <i>``, repeats get ``.1``, ``.2`` ...
    """
    names: List[str] = []
    seen: Dict[str, int] = {}

    for i, name in enumerate(raw):
        if not name:
            name = f"Unnamed: {i}"

        candidate = name
        while candidate in seen:
            seen[name] += 1
            candidate = f"{name}.{seen[name]}"

        seen.setdefault(candidate, 0)
        names.append(candidate)

    return tuple(names)


def _to_cell(value: str) -> Cell:
    value = value.strip()
    return value if value else None


def parse_table(text: Optional[str], delimiter: str = DEFAULT_DELIMITER) -> Table:
    """
    Parse delimited text into a Table.

    Rules:
    - first non-blank line is the header, names trimmed
    - short rows are padded with missing cells, long rows truncated
    - empty values are missing (``None``)
    - blank lines between records are kept as all-missing rows

    Raises:
        MalformedInputError: the text is empty or has no header line
        ConfigError: the delimiter is empty
    """
    if not delimiter:
        raise ConfigError("delimiter must be a non-empty string")

    if text is None or not text.strip():
        raise MalformedInputError("Input is empty: no header line found")

    lines = text.strip().splitlines()

    columns = _unique_headers([h.strip() for h in lines[0].split(delimiter)])
    width = len(columns)

    rows = []
    for line in lines[1:]:
        values = [_to_cell(v) for v in line.split(delimiter)[:width]]
        values.extend([None] * (width - len(values)))
        rows.append(tuple(values))

    table = Table(columns=columns, rows=tuple(rows))

    logger.debug(
        "Parsed table: %s rows x %s columns", table.row_count, table.column_count
    )
    return table
