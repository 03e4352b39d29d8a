#!/usr/bin/env python3
"""
TableAssembler - Builds GroupsData from a data directory.

Coordinates the parsing components to turn the supergroup markdown table
(and an optional companion CSV) into sorted Supergroup records.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pyuca import Collator

from .data_models import GroupsData, Supergroup
from .components.markdown_file_reader import MarkdownFileReader
from .components.markdown_row_parser import header_name, parse_md_row
from .components.column_resolver import resolve_column
from .components.csv_lookup import build_lookup
from .components.cell_extractors import (
    extract_goals,
    extract_linked_items,
    extract_single_link,
    extract_text,
    extract_url,
)

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
CSV_SUFFIX = ".csv"

# Header, separator and at least one data row
MIN_TABLE_LINES = 3
FIRST_DATA_LINE = 2

ABOUT_URL_ALIASES = ("About Us URL", "About URL", "About")
VISION_KEY_COLUMN = "name"
VISION_VALUE_COLUMN = "vision"


@lru_cache(maxsize=None)
def _collator() -> Collator:
    """Unicode collator, built once (loading the key table is slow)."""
    return Collator()


def name_sort_key(name: str) -> Tuple[int, ...]:
    """
    Unicode Collation Algorithm key for supergroup names.

    Punctuation and symbols sort before digits, digits before letters.
    Letters compare by base letter first, then accents, then case with
    lowercase first: "{Brace}" < "AI: Safety" < "AI1" < "apple" < "Apple",
    and "éclair" sorts next to "eclair" rather than after "z".
    """
    return _collator().sort_key(name)


class TableAssembler:
    """
    Turns a data directory into GroupsData.

    The directory is expected to hold at most one markdown table file and at
    most one CSV file; the first of each (by file name) is used. Missing
    files and short tables produce an empty result rather than an error.
    """

    def __init__(self, data_dir: str | Path):
        """
        Initialize assembler.

        Args:
            data_dir: Directory containing the markdown table and optional CSV
        """
        self.data_dir = Path(data_dir)

    def assemble(self) -> GroupsData:
        """
        Read the data directory and build the sorted record set.

        Returns:
            GroupsData (empty when no usable table is found)

        Raises:
            OSError: If the directory or a data file cannot be read
        """
        file_names = self._list_data_files()

        md_file = self._find_file(file_names, MARKDOWN_SUFFIX)
        if md_file is None:
            logger.warning(f"No markdown table found in {self.data_dir}")
            return GroupsData()

        table_lines = MarkdownFileReader(self.data_dir / md_file).read_table_lines()
        if len(table_lines) < MIN_TABLE_LINES:
            logger.warning(
                f"{md_file} has {len(table_lines)} table lines, need at least {MIN_TABLE_LINES}"
            )
            return GroupsData()

        headers = [header_name(cell) for cell in parse_md_row(table_lines[0])]

        csv_file = self._find_file(file_names, CSV_SUFFIX)
        vision_lookup: Dict[str, str] = {}
        if csv_file is not None:
            vision_lookup = build_lookup(
                self.data_dir / csv_file, VISION_KEY_COLUMN, VISION_VALUE_COLUMN
            )

        supergroups = [
            self._build_supergroup(self._row_mapping(headers, line), vision_lookup)
            for line in table_lines[FIRST_DATA_LINE:]
        ]
        supergroups.sort(key=lambda sg: name_sort_key(sg.name))

        logger.info(
            f"Assembled {len(supergroups)} supergroups from {md_file}"
            + (f" with {len(vision_lookup)} visions from {csv_file}" if csv_file else "")
        )
        return GroupsData(supergroups=tuple(supergroups))

    def _list_data_files(self) -> List[str]:
        """File names in the data directory, sorted for stable selection."""
        return sorted(entry.name for entry in self.data_dir.iterdir() if entry.is_file())

    @staticmethod
    def _find_file(file_names: List[str], suffix: str) -> Optional[str]:
        """First file name with the given suffix, or None."""
        for file_name in file_names:
            if file_name.endswith(suffix):
                return file_name
        return None

    @staticmethod
    def _row_mapping(headers: List[str], line: str) -> Dict[str, str]:
        """
        Zip a table line against the headers.

        Missing trailing cells become empty strings; extra cells are dropped.
        """
        cells = parse_md_row(line)
        return {
            header: cells[index] if index < len(cells) else ""
            for index, header in enumerate(headers)
        }

    @staticmethod
    def _build_supergroup(row: Dict[str, str], vision_lookup: Dict[str, str]) -> Supergroup:
        """Apply the cell extractors to one row."""
        name_info = extract_single_link(resolve_column(row, "Name"))
        org_info = extract_single_link(resolve_column(row, "Org"))

        return Supergroup(
            name=name_info.name,
            url=name_info.url,
            org=org_info.name,
            org_url=org_info.url,
            mission=extract_text(resolve_column(row, "Mission")),
            goals=extract_goals(resolve_column(row, "Goals")),
            vision=vision_lookup.get(name_info.name, ""),
            about_url=extract_url(resolve_column(row, *ABOUT_URL_ALIASES)),
            groups=tuple(extract_linked_items(resolve_column(row, "Groups"))),
            subgroups=tuple(extract_linked_items(resolve_column(row, "Subgroups"))),
            teams=tuple(extract_linked_items(resolve_column(row, "Teams"))),
        )
