"""
Process-lifetime cache for GroupsData.

The data directory is read-only input, so the record set is loaded once on
first request and served from memory afterwards. The cache is an explicit
object so the API, the CLI and tests can each own one.
"""

import logging
from threading import Lock
from typing import Optional

from .data_models import GroupsData
from .table_assembler import TableAssembler
from .utils.config import get_data_dir

logger = logging.getLogger(__name__)


class GroupsDataCache:
    """Loads GroupsData lazily, exactly once."""

    def __init__(self, assembler: TableAssembler):
        """
        Initialize an empty cache.

        Args:
            assembler: Assembler used to build the value on first access
        """
        self.assembler = assembler
        self._value: Optional[GroupsData] = None
        self.lock = Lock()

    @property
    def is_loaded(self) -> bool:
        """True once the record set has been loaded."""
        return self._value is not None

    def get(self) -> GroupsData:
        """
        Return the cached record set, loading it on first call.

        Concurrent first calls are serialized so only one load happens.
        A failed load leaves the cache empty and the error propagates.

        Returns:
            The same GroupsData object on every call
        """
        if self._value is not None:
            return self._value

        with self.lock:
            if self._value is None:
                logger.info(f"Loading supergroup data from {self.assembler.data_dir}")
                self._value = self.assembler.assemble()
        return self._value


_default_cache: Optional[GroupsDataCache] = None
_default_cache_lock = Lock()


def get_default_cache() -> GroupsDataCache:
    """Cache for the configured data directory, created on first use."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = GroupsDataCache(TableAssembler(get_data_dir()))
    return _default_cache


def load_groups_data(cache: Optional[GroupsDataCache] = None) -> GroupsData:
    """
    Accessor used by consumers of the record set.

    Args:
        cache: Cache to read from (default: the configured data directory)

    Returns:
        The loaded GroupsData
    """
    if cache is None:
        cache = get_default_cache()
    return cache.get()
