"""
MarkdownRowParser Component

Splits pipe-delimited markdown table rows into cells and derives column
names from header cells. Escaped pipes (``\\|``) are treated as separators.
"""

import re
from typing import List

PIPE = '|'
HEADER_LABEL_PATTERN = re.compile(r'\[([^\]]+)\]')


def parse_md_row(line: str) -> List[str]:
    """
    Split a table row into stripped cells.

    One leading and one trailing pipe are removed from the raw line before
    splitting, so ``"| a | b |"`` yields ``["a", "b"]``.

    Args:
        line: A raw markdown table line

    Returns:
        List of cell strings
    """
    if line.startswith(PIPE):
        line = line[1:]
    if line.endswith(PIPE):
        line = line[:-1]
    return [cell.strip() for cell in line.split(PIPE)]


def header_name(cell: str) -> str:
    """
    Column name for a header cell.

    Headers exported from wikis are often links (``[Name](...)``); the
    bracketed label is used when present, otherwise the stripped cell text.
    """
    match = HEADER_LABEL_PATTERN.search(cell)
    if match:
        return match.group(1)
    return cell.strip()
