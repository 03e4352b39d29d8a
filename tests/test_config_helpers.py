#!/usr/bin/env python3
"""Unit tests for config helper functions."""

import pytest
from pathlib import Path
from supergroups.utils.config import ConfigManager


@pytest.fixture
def config(tmp_path, monkeypatch):
    """ConfigManager started in a directory tree without env files."""
    workdir = tmp_path / "a" / "b" / "c"
    workdir.mkdir(parents=True)
    monkeypatch.chdir(workdir)
    return ConfigManager()


class TestConfigHelpers:
    """Test type-safe environment variable helpers."""

    def test_get_env_string_returns_value(self, config, monkeypatch):
        monkeypatch.setenv('TEST_STRING', 'hello')
        assert config.get_env_string('TEST_STRING') == 'hello'

    def test_get_env_string_returns_default(self, config):
        assert config.get_env_string('NONEXISTENT_VAR', 'default_value') == 'default_value'

    def test_get_env_int_returns_value(self, config, monkeypatch):
        monkeypatch.setenv('TEST_INT', '42')
        result = config.get_env_int('TEST_INT', 0)
        assert result == 42
        assert isinstance(result, int)

    def test_get_env_int_invalid_returns_default(self, config, monkeypatch):
        monkeypatch.setenv('TEST_INT', 'not_a_number')
        assert config.get_env_int('TEST_INT', 99) == 99

    def test_get_env_bool_true_values(self, config, monkeypatch):
        for true_val in ['true', 'True', 'TRUE', '1', 'yes', 'YES', 'on', 'ON']:
            monkeypatch.setenv('TEST_BOOL', true_val)
            assert config.get_env_bool('TEST_BOOL', False) is True, f"Failed for value: {true_val}"

    def test_get_env_bool_false_values(self, config, monkeypatch):
        for false_val in ['false', '0', 'no', 'off', 'anything']:
            monkeypatch.setenv('TEST_BOOL', false_val)
            assert config.get_env_bool('TEST_BOOL', True) is False, f"Failed for value: {false_val}"

    def test_get_env_bool_default(self, config, monkeypatch):
        monkeypatch.delenv('TEST_BOOL', raising=False)
        assert config.get_env_bool('TEST_BOOL', True) is True


class TestDirectorySettings:
    """Test data directory, password and CORS settings."""

    def test_data_dir_default(self, config, monkeypatch):
        monkeypatch.delenv('SUPERGROUPS_DATA_DIR', raising=False)
        assert config.get_data_dir() == Path('data')

    def test_data_dir_from_env(self, config, monkeypatch):
        monkeypatch.setenv('SUPERGROUPS_DATA_DIR', '/srv/groups')
        assert config.get_data_dir() == Path('/srv/groups')

    def test_password_unset(self, config, monkeypatch):
        monkeypatch.delenv('TOP_SECRET_PASSWORD', raising=False)
        assert config.get_api_password() is None

    def test_empty_password_is_unset(self, config, monkeypatch):
        monkeypatch.setenv('TOP_SECRET_PASSWORD', '')
        assert config.get_api_password() is None

    def test_password_from_env(self, config, monkeypatch):
        monkeypatch.setenv('TOP_SECRET_PASSWORD', 's3cret')
        assert config.get_api_password() == 's3cret'

    def test_cors_origins_parsing(self, config, monkeypatch):
        monkeypatch.setenv('CORS_ORIGINS', 'http://a.test, http://b.test,')
        assert config.get_cors_origins() == ['http://a.test', 'http://b.test']

    def test_summary_masks_password(self, config, monkeypatch, capsys):
        monkeypatch.setenv('TOP_SECRET_PASSWORD', 's3cret')
        config.print_config_summary()
        output = capsys.readouterr().out
        assert 's3cret' not in output
        assert 'API password: ******' in output


class TestEnvFileDiscovery:
    """Test .env discovery in the working directory and its parents."""

    def test_no_env_file(self, config):
        assert config._env_path is None

    def test_env_file_in_parent_directory(self, tmp_path, monkeypatch):
        workdir = tmp_path / "project" / "app"
        workdir.mkdir(parents=True)
        env_file = tmp_path / "project" / ".env.supergroups"
        env_file.write_text("SUPERGROUPS_TEST_DISCOVERY=found\n")
        monkeypatch.chdir(workdir)
        # setenv first so teardown removes the value loaded from the file
        monkeypatch.setenv('SUPERGROUPS_TEST_DISCOVERY', 'unset')
        monkeypatch.delenv('SUPERGROUPS_TEST_DISCOVERY')

        config = ConfigManager()

        assert config._env_path == env_file
        assert config.get_env_string('SUPERGROUPS_TEST_DISCOVERY') == 'found'

    def test_process_environment_wins(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("SUPERGROUPS_DATA_DIR=/from/file\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv('SUPERGROUPS_DATA_DIR', '/from/env')

        assert ConfigManager().get_data_dir() == Path('/from/env')
