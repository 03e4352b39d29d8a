"""
MarkdownFileReader Component

Reads a markdown file and extracts the lines that belong to a pipe table.
"""

from pathlib import Path
from typing import List

TABLE_LINE_PREFIX = '|'


class MarkdownFileReader:
    """Reads markdown files and extracts table lines."""

    def __init__(self, file_path: str | Path):
        """
        Initialize reader with a markdown file path.

        Args:
            file_path: Path to the markdown file to read

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")
        self._lines: List[str] | None = None

    def read_file(self) -> str:
        """
        Read the entire file contents, keeping line endings as stored.

        Undecodable bytes are replaced with U+FFFD rather than failing.

        Returns:
            The complete file contents as a string

        Raises:
            OSError: If the file cannot be read
        """
        with open(self.file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return f.read()

    def read_lines(self) -> List[str]:
        """
        Read the file and split it on newline characters.

        Carriage returns are kept, matching how the table lines are later
        tokenized. Results are cached so subsequent calls don't re-read the
        file.

        Returns:
            List of lines without their trailing newline
        """
        if self._lines is None:
            self._lines = self.read_file().split('\n')
        return self._lines

    def read_table_lines(self) -> List[str]:
        """
        Lines that are part of a pipe table.

        A line belongs to a table when, ignoring surrounding whitespace, it
        starts with ``|``. The lines are returned unmodified.

        Returns:
            Table lines in file order
        """
        return [
            line for line in self.read_lines()
            if line.strip().startswith(TABLE_LINE_PREFIX)
        ]
