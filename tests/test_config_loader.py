"""
Tests for the YAML settings loader.
"""

import pytest

from vitasync.core.config import DEFAULT_DATA_NAME, JSON_INDENT
from vitasync.core.config_loader import get_home_dir, get_user_yaml_path, load_settings


def _write_config(home, text: str) -> None:
    home.mkdir(parents=True, exist_ok=True)
    (home / "config.yaml").write_text(text, encoding="utf-8")


class TestDefaults:
    def test_home_from_env(self, isolated_home):
        assert get_home_dir() == isolated_home

    def test_home_fallback(self, monkeypatch):
        monkeypatch.delenv("VITASYNC_HOME", raising=False)
        assert get_home_dir().name == ".vitasync"

    def test_no_user_file(self):
        assert get_user_yaml_path() is None

    def test_defaults(self, isolated_home):
        settings = load_settings()
        assert settings["data_path"] == isolated_home / "vitasync.json"
        assert settings["data_name"] == DEFAULT_DATA_NAME
        assert settings["json_indent"] == JSON_INDENT


class TestOverrides:
    def test_overrides_merge_over_defaults(self, isolated_home):
        _write_config(isolated_home, "data_name: Gym Log\njson_indent: 2\n")
        settings = load_settings()
        assert settings["data_name"] == "Gym Log"
        assert settings["json_indent"] == 2
        assert settings["data_path"] == isolated_home / "vitasync.json"

    def test_empty_file_uses_defaults(self, isolated_home):
        _write_config(isolated_home, "")
        assert load_settings()["json_indent"] == JSON_INDENT

    def test_unknown_keys_ignored(self, isolated_home):
        _write_config(isolated_home, "colour: blue\n")
        assert "colour" not in load_settings()

    def test_malformed_yaml_warns(self, isolated_home):
        _write_config(isolated_home, "data_name: [unclosed\n")
        with pytest.warns(UserWarning, match="config"):
            settings = load_settings()
        assert settings["data_name"] == DEFAULT_DATA_NAME

    def test_non_mapping_warns(self, isolated_home):
        _write_config(isolated_home, "- just\n- a list\n")
        with pytest.warns(UserWarning, match="mapping"):
            load_settings()

    def test_bad_indent_warns(self, isolated_home):
        _write_config(isolated_home, "json_indent: -3\n")
        with pytest.warns(UserWarning, match="json_indent"):
            settings = load_settings()
        assert settings["json_indent"] == JSON_INDENT
