"""Tests for configuration loading."""

import pytest

from icsgen.config.settings import ConfigurationManager, load_config
from icsgen.config.utils import deep_merge, resolve_path
from icsgen.exceptions import ConfigError


@pytest.fixture
def manager():
    manager = ConfigurationManager()
    manager._config = None
    return manager

def test_manager_is_singleton():
    assert ConfigurationManager() is ConfigurationManager()

def test_defaults_without_config_file(manager, tmp_path, monkeypatch):
    monkeypatch.delenv('ICSGEN_TIMEZONE')
    config = manager.reload_config(str(tmp_path))
    assert config.timezone is None
    assert config.filename == 'event'
    assert config.output_dir == '.'
    assert config.config_dir == str(tmp_path)
    assert config.log_level == 'WARNING'
    assert config.log_file is None
    assert config.log_format == 'text'

def test_load_config_is_cached(manager, tmp_path):
    first = load_config(str(tmp_path))
    assert load_config() is first
    assert manager.config is first

def test_config_file_is_merged(manager, tmp_path, monkeypatch):
    monkeypatch.delenv('ICSGEN_TIMEZONE')
    (tmp_path / 'config.yaml').write_text(
        "timezone: Europe/Helsinki\n"
        "filename: meetup\n"
        "directories:\n"
        "  output: calendars\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  format: json\n",
        encoding='utf-8'
    )
    config = manager.reload_config(str(tmp_path))
    assert config.timezone == 'Europe/Helsinki'
    assert config.filename == 'meetup'
    assert config.output_dir == 'calendars'
    assert config.log_level == 'DEBUG'
    assert config.log_format == 'json'
    # untouched nested defaults survive the merge
    assert config.global_config['logging']['file'] is None

def test_environment_overrides_config_file(manager, tmp_path, monkeypatch):
    (tmp_path / 'config.yaml').write_text("timezone: Europe/Helsinki\nfilename: meetup\n", encoding='utf-8')
    monkeypatch.setenv('ICSGEN_TIMEZONE', 'Asia/Tokyo')
    monkeypatch.setenv('ICSGEN_OUTPUT_DIR', '/srv/ics')
    config = manager.reload_config(str(tmp_path))
    assert config.timezone == 'Asia/Tokyo'
    assert config.filename == 'meetup'
    assert config.output_dir == '/srv/ics'

def test_config_dir_from_environment(manager, tmp_path):
    (tmp_path / 'config.yaml').write_text("filename: from-env-dir\n", encoding='utf-8')
    assert manager.reload_config().filename == 'from-env-dir'

def test_empty_config_file(manager, tmp_path):
    (tmp_path / 'config.yaml').write_text("", encoding='utf-8')
    assert manager.reload_config(str(tmp_path)).filename == 'event'

@pytest.mark.parametrize('content', [
    "timezone: Nowhere/Special\n",
    "logging:\n  level: LOUD\n",
    "logging:\n  format: xml\n",
    "- just\n- a list\n",
    "timezone: [unclosed\n",
    "directories:\n",
    "logging:\n",
    "logging: verbose\n",
    "directories:\n  - logs\n",
])
def test_invalid_config(manager, tmp_path, monkeypatch, content):
    monkeypatch.delenv('ICSGEN_TIMEZONE')
    (tmp_path / 'config.yaml').write_text(content, encoding='utf-8')
    with pytest.raises(ConfigError):
        manager.reload_config(str(tmp_path))

def test_deep_merge():
    base = {'a': 1, 'nested': {'x': 1, 'y': 2}}
    merged = deep_merge(base, {'nested': {'y': 3}, 'b': 2})
    assert merged == {'a': 1, 'b': 2, 'nested': {'x': 1, 'y': 3}}
    assert base == {'a': 1, 'nested': {'x': 1, 'y': 2}}
    assert deep_merge(base, None) == base

def test_resolve_path(tmp_path):
    assert resolve_path('out', tmp_path) == tmp_path / 'out'
    assert resolve_path(tmp_path / 'abs', '/elsewhere') == tmp_path / 'abs'
