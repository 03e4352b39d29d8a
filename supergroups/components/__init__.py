"""
Components for the supergroup table parser.

Small, pure parsing helpers combined by the TableAssembler.
"""

from .markdown_file_reader import MarkdownFileReader
from .csv_lookup import build_lookup

__all__ = [
    "MarkdownFileReader",
    "build_lookup",
]
