"""Tests for GroupsDataCache and the load_groups_data accessor."""

import pytest
import threading
import time
from unittest.mock import Mock, patch

from supergroups import groups_cache
from supergroups.components.markdown_file_reader import MarkdownFileReader
from supergroups.data_models import GroupsData, Supergroup
from supergroups.groups_cache import GroupsDataCache, load_groups_data
from supergroups.table_assembler import TableAssembler


class TestGroupsDataCache:
    """Test lazy, load-once caching."""

    def test_not_loaded_until_first_get(self, data_dir):
        cache = GroupsDataCache(TableAssembler(data_dir))
        assert cache.is_loaded is False
        cache.get()
        assert cache.is_loaded is True

    def test_second_get_does_not_reread_storage(self, data_dir):
        cache = GroupsDataCache(TableAssembler(data_dir))
        with patch.object(
            MarkdownFileReader, "read_file", autospec=True,
            side_effect=MarkdownFileReader.read_file
        ) as read_spy:
            first = cache.get()
            second = cache.get()

        assert first is second
        assert len(first) == 2
        assert read_spy.call_count == 1

    def test_data_changes_after_load_are_ignored(self, data_dir):
        cache = GroupsDataCache(TableAssembler(data_dir))
        first = cache.get()
        (data_dir / "supergroups.md").write_text("", encoding="utf-8")
        assert cache.get() is first
        assert len(cache.get()) == 2

    def test_empty_result_is_cached(self):
        assembler = Mock()
        assembler.assemble.return_value = GroupsData()
        cache = GroupsDataCache(assembler)
        cache.get()
        cache.get()
        assert assembler.assemble.call_count == 1

    def test_concurrent_first_gets_load_once(self):
        """Threads racing on an empty cache trigger a single load."""
        def slow_assemble():
            time.sleep(0.05)
            return GroupsData(supergroups=(Supergroup(name="A"),))

        assembler = Mock()
        assembler.assemble.side_effect = slow_assemble
        cache = GroupsDataCache(assembler)

        results = []
        threads = [threading.Thread(target=lambda: results.append(cache.get())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert assembler.assemble.call_count == 1
        assert len(results) == 8
        assert all(result is results[0] for result in results)

    def test_failed_load_is_not_cached(self, tmp_path):
        cache = GroupsDataCache(TableAssembler(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            cache.get()
        assert cache.is_loaded is False


class TestLoadGroupsData:
    """Test the accessor."""

    def test_explicit_cache(self, data_dir_with_csv):
        cache = GroupsDataCache(TableAssembler(data_dir_with_csv))
        assert load_groups_data(cache) is cache.get()

    def test_default_cache_uses_configured_data_dir(self, data_dir, monkeypatch):
        monkeypatch.setattr(groups_cache, "_default_cache", None)
        monkeypatch.setenv("SUPERGROUPS_DATA_DIR", str(data_dir))

        first = load_groups_data()
        second = load_groups_data()

        assert first is second
        assert [sg.name for sg in first.supergroups] == ["Alpha Guild", "Zeta Works"]
        assert groups_cache.get_default_cache().assembler.data_dir == data_dir
