"""
CsvRowParser Component

Splits a single CSV line into fields, honouring double-quoted fields and
doubled quotes inside them. Works on one line at a time, so quoted values
spanning several lines are split at the line break.
"""

from typing import List

QUOTE = '"'
DELIMITER = ','


def parse_csv_row(row: str) -> List[str]:
    """
    Tokenize one CSV line.

    Args:
        row: A single line of CSV text (no line terminator)

    Returns:
        List of field values with enclosing quotes removed. The final field is
        always emitted, so ``"a,"`` yields ``["a", ""]``.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    while i < len(row):
        char = row[i]
        if in_quotes:
            if char == QUOTE:
                if i + 1 < len(row) and row[i + 1] == QUOTE:
                    # Escaped quote
                    current.append(QUOTE)
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(char)
        elif char == QUOTE:
            in_quotes = True
        elif char == DELIMITER:
            fields.append(''.join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append(''.join(current))
    return fields
