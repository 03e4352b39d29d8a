"""
Cell extractors.

Convert raw markdown table cells into domain values: linked items, plain
text, goal lists and URLs. Every extractor is a pure function of one cell.
"""

import re
from typing import List, Optional

from ..data_models import LinkedItem
from .text_primitives import is_empty_cell, unescape_markdown

LINK_PATTERN = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
# Link with a possibly empty label, only used for URL cells
URL_LINK_PATTERN = re.compile(r'\[([^\]]*)\]\(([^)]+)\)')

GOAL_FUNCTION_WORDS = (
    'a', 'an', 'the', 'our', 'their', 'its',
    'to', 'into', 'in', 'for', 'from', 'with',
)
# Function words end at an ASCII word boundary, so "inédit" still counts as "in"
GOAL_SPLIT_PATTERN = re.compile(
    r'(?<=\))\s+(?=[A-Z])'
    r'|(?<=[a-z])\s+(?=[A-Z][a-z]+\s+(?:' + '|'.join(GOAL_FUNCTION_WORDS) + r')(?![A-Za-z0-9_]))'
)
TRAILING_PERIOD_PATTERN = re.compile(r'\.?\s*\Z')


def extract_linked_items(cell: str) -> List[LinkedItem]:
    """
    Extract every ``[label](target)`` link in a cell, left to right.

    Args:
        cell: Raw cell text

    Returns:
        One LinkedItem per link; empty for placeholder cells or cells
        without links
    """
    if is_empty_cell(cell):
        return []

    return [
        LinkedItem(name=unescape_markdown(match.group(1)), url=match.group(2))
        for match in LINK_PATTERN.finditer(cell)
    ]


def extract_single_link(cell: str) -> LinkedItem:
    """
    Extract the first link in a cell, falling back to the cell text.

    Placeholder cells are not special here: ``"-"`` becomes ``LinkedItem("-")``.
    """
    cleaned = cell.strip()
    match = LINK_PATTERN.search(cleaned)
    if match:
        return LinkedItem(name=unescape_markdown(match.group(1)), url=match.group(2))
    return LinkedItem(name=unescape_markdown(cleaned))


def extract_text(cell: str) -> str:
    """Stripped, unescaped cell text, or an empty string for empty cells."""
    if is_empty_cell(cell):
        return ''
    return unescape_markdown(cell.strip())


def extract_url(cell: str) -> Optional[str]:
    """
    Target of the first link in a cell with trailing slashes removed.

    Returns None for empty cells and for cells containing only plain text.
    """
    if is_empty_cell(cell):
        return None
    match = URL_LINK_PATTERN.search(cell.strip())
    if not match:
        return None
    return match.group(2).rstrip('/')


def extract_goals(cell: str) -> str:
    """
    Rebuild sentence boundaries in a run-on list of goals.

    Goal cells are usually several statements pasted together without
    punctuation ("Build tools for teams Grow the community"). The text is
    split where a closing parenthesis is followed by an uppercase letter, or
    where a lowercase letter is followed by a capitalized word and then one
    of GOAL_FUNCTION_WORDS. Pieces are joined with ``". "`` and the result
    ends with exactly one period.

    The heuristic is deliberately simple and produces false splits on some
    inputs; its output must stay stable for existing data.

    Args:
        cell: Raw goals cell

    Returns:
        Period-separated goal statements, or an empty string
    """
    text = extract_text(cell)
    if not text:
        return ''

    goals = GOAL_SPLIT_PATTERN.split(text)
    return TRAILING_PERIOD_PATTERN.sub('.', '. '.join(goals), count=1)
