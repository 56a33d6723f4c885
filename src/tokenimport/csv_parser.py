"""
CSV Parser for CTM (Layer 1: Raw Input -> Canonical Token Model).

Converts three-column token spreadsheets to CanonicalModel objects.

CSV Format:
    collection, variable, value

Example:
    collection,variable,value
    Colors,primary-blue,#0066FF
    Spacing,small,8px

Syntax Notes:
    - The first line is a header and is always discarded
    - Fields are split on every comma; quoted fields are NOT supported,
      so a value cannot itself contain a comma
    - Rows with a missing or blank field are skipped, never an error
    - Values are coerced (boolean > color > number > string)
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from tokenimport.coercion import coerce_value
from tokenimport.model import CanonicalModel


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("collection", "variable", "value")


@dataclass
class CSVRow:
    """Parsed CSV row."""
    line: int  # 1-based, header is line 1
    collection: str
    variable: str
    value: str


def _parse_csv_rows(csv_content: str) -> Iterator[CSVRow]:
    """Yield usable rows, skipping the header and incomplete rows."""
    stripped = csv_content.strip()
    leading_lines = csv_content[: len(csv_content) - len(csv_content.lstrip())].count("\n")

    lines = stripped.split("\n")
    for index, line in enumerate(lines[1:], start=2):
        line_number = index + leading_lines
        fields = [part.strip() for part in line.split(",")]
        fields += [""] * (len(REQUIRED_FIELDS) - len(fields))
        collection, variable, value = fields[: len(REQUIRED_FIELDS)]

        if not collection or not variable or not value:
            logger.debug("Skipping CSV line %d: missing collection, variable or value", line_number)
            continue

        yield CSVRow(line=line_number, collection=collection, variable=variable, value=value)


def parse_csv_string(csv_content: str) -> CanonicalModel:
    """
    Parse CSV content into a CanonicalModel.

    Args:
        csv_content: CSV as string

    Returns:
        CanonicalModel; duplicate (collection, variable) pairs keep the
        last row. Never raises on malformed rows.
    """
    model = CanonicalModel()

    for row in _parse_csv_rows(csv_content):
        model.add_token(row.collection, row.variable, coerce_value(row.value))

    return model


__all__ = [
    "CSVRow",
    "REQUIRED_FIELDS",
    "parse_csv_string",
]
