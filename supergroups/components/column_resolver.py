"""Case-insensitive header lookup with alias precedence."""

from typing import Mapping


def resolve_column(row: Mapping[str, str], *candidates: str) -> str:
    """
    Return the cell for the first candidate header present in the row.

    Candidates are tried in order and compared case-insensitively against the
    row's headers, so ``resolve_column(row, "About Us URL", "About")`` prefers
    the first alias even when both columns exist.

    Args:
        row: Header name -> cell value for one table row
        *candidates: Acceptable header names, highest precedence first

    Returns:
        The matching cell value, or an empty string when no header matches
    """
    for candidate in candidates:
        lowered = candidate.lower()
        for key, value in row.items():
            if key.lower() == lowered:
                return value
    return ''
