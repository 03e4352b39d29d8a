"""
Supergroup Directory

Parses the supergroup markdown table (plus an optional vision CSV) into
immutable records and serves them to the directory frontend.
"""

__version__ = "1.0.0"

# Main classes available for library use
from .data_models import GroupsData, LinkedItem, Supergroup
from .table_assembler import TableAssembler
from .groups_cache import GroupsDataCache, load_groups_data

__all__ = [
    "GroupsData",
    "LinkedItem",
    "Supergroup",
    "TableAssembler",
    "GroupsDataCache",
    "load_groups_data",
]
