"""
Text primitives shared by the table parsers.

Markdown exports escape punctuation with a backslash (``\\*``, ``\\-``) and use
``-`` as a placeholder for cells that carry no data.
"""

import re

ESCAPE_PATTERN = re.compile(r'\\(.)')
PLACEHOLDER_CELLS = ('-', '\\-')


def unescape_markdown(text: str) -> str:
    """
    Replace every backslash-escaped character with the literal character.

    Args:
        text: Raw cell text, possibly containing ``\\X`` escapes

    Returns:
        Text with escapes removed (``"a\\*b"`` -> ``"a*b"``)
    """
    return ESCAPE_PATTERN.sub(r'\1', text)


def is_empty_cell(cell: str) -> bool:
    """Return True for blank cells and the ``-`` / ``\\-`` placeholders."""
    stripped = cell.strip()
    return not stripped or stripped in PLACEHOLDER_CELLS
