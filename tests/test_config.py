import json

import pytest

from bgrunner.config import (
    CONFIG_FILE_NAME,
    Config,
    ConfigError,
    default_config_dir,
    ensure_config_file,
    load_config,
)


def test_default_config_dir_is_under_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_dir() == tmp_path / ".config" / "runner"


def test_ensure_config_file_creates_default(tmp_path):
    config_dir = tmp_path / "nested" / "runner"
    path = ensure_config_file(config_dir)
    assert path == config_dir / "runner.json"
    assert json.loads(path.read_text()) == {"startLines": 20}


def test_ensure_config_file_keeps_existing(tmp_path):
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text('{"startLines": 5}')
    ensure_config_file(tmp_path)
    assert path.read_text() == '{"startLines": 5}'


def test_load_config_defaults_when_missing(tmp_path):
    assert load_config(tmp_path) == Config(start_lines=20)


def test_load_config_reads_value(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text('{"startLines": 50}')
    assert load_config(tmp_path).start_lines == 50


def test_load_config_missing_key_keeps_default(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text('{"other": 1}')
    assert load_config(tmp_path).start_lines == 20


def test_load_config_key_matches_without_case(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text('{"STARTLINES": 3}')
    assert load_config(tmp_path).start_lines == 3


def test_load_config_null_document_gives_defaults(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("null")
    assert load_config(tmp_path).start_lines == 20


@pytest.mark.parametrize("content", ["", "{not json", "[1, 2]", '{"startLines": "ten"}', '{"startLines": 1.5}'])
def test_load_config_invalid_raises(tmp_path, content):
    (tmp_path / CONFIG_FILE_NAME).write_text(content)
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_uses_home_by_default(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = load_config()
    assert config.start_lines == 20
    assert (tmp_path / ".config" / "runner" / "runner.json").is_file()