"""
CsvLookup Component

Builds a key -> value dictionary from two columns of a CSV file. Used to
supplement the markdown table with columns it lacks (e.g. vision statements).
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from .csv_row_parser import parse_csv_row

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r'\r?\n')


def _find_column(headers: List[str], column: str) -> Optional[int]:
    """Index of the first header equal to column (case-insensitive)."""
    lowered = column.lower()
    for index, header in enumerate(headers):
        if header.lower() == lowered:
            return index
    return None


def _field(values: List[str], index: int) -> str:
    return values[index] if index < len(values) else ''


def build_lookup(path: str | Path, key_column: str, value_column: str) -> Dict[str, str]:
    """
    Build a lookup from two CSV columns.

    Missing files, files without data rows and files lacking either column
    all produce an empty dictionary. Rows with an empty key or value are
    skipped; duplicate keys keep the last value.

    Args:
        path: Path to the CSV file
        key_column: Header of the key column (case-insensitive)
        value_column: Header of the value column (case-insensitive)

    Returns:
        Dictionary mapping key -> value

    Raises:
        OSError: If the file exists but cannot be read
    """
    lookup: Dict[str, str] = {}
    csv_path = Path(path)
    if not csv_path.exists():
        logger.debug(f"CSV lookup file not found: {csv_path}")
        return lookup

    with open(csv_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        text = f.read()

    rows = LINE_BREAK_PATTERN.split(text)
    if len(rows) < 2:
        logger.debug(f"CSV lookup file has no data rows: {csv_path}")
        return lookup

    headers = parse_csv_row(rows[0])
    key_index = _find_column(headers, key_column)
    value_index = _find_column(headers, value_column)
    if key_index is None or value_index is None:
        logger.warning(
            f"CSV file {csv_path.name} lacks '{key_column}' or '{value_column}' column"
        )
        return lookup

    for row in rows[1:]:
        if not row.strip():
            continue
        values = parse_csv_row(row)
        key = _field(values, key_index)
        value = _field(values, value_index)
        if key and value:
            lookup[key] = value

    logger.info(f"Loaded {len(lookup)} '{value_column}' entries from {csv_path.name}")
    return lookup
