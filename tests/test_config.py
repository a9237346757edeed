"""Tests for the config module."""
import json
import logging

import pytest

from badgen.config import (
    get_style,
    list_style_names,
    load_config,
    save_config,
    set_style,
)
from badgen.errors import ConfigurationError
from badgen.style import Style, StyleKind


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.json") == {}

    def test_invalid_json_returns_empty(self, tmp_path, caplog):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="badgen.config"):
            assert load_config(path) == {}
        assert "unreadable config" in caplog.text

    def test_non_object_returns_empty(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(path) == {}

    def test_loads_valid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"key": "value"}', encoding="utf-8")
        assert load_config(path) == {"key": "value"}


class TestSaveConfig:
    def test_creates_file(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"hello": "world"}, path)
        assert json.loads(path.read_text()) == {"hello": "world"}

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "sub" / "dir" / "config.json"
        save_config({"nested": True}, path)
        assert path.exists()

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"v": 1}, path)
        save_config({"v": 2}, path)
        assert json.loads(path.read_text()) == {"v": 2}


class TestNamedStyles:
    def test_builtin_without_config(self, tmp_path):
        path = tmp_path / "config.json"
        assert get_style("classic", path) == Style.classic()
        assert get_style("FLAT", path) == Style.flat()

    def test_unknown_name(self, tmp_path):
        with pytest.raises(ConfigurationError, match="unknown style"):
            get_style("release", tmp_path / "config.json")

    def test_set_and_get_roundtrip(self, tmp_path):
        path = tmp_path / "config.json"
        created = set_style("release", {"base": "flat", "value_color": "green"}, path)
        loaded = get_style("release", path)
        assert loaded == created
        assert loaded.kind is StyleKind.FLAT
        assert loaded.value_color == "#3C1"

    def test_base_defaults_to_classic(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"styles": {"big": {"font_size": 12}}}, path)
        style = get_style("big", path)
        assert style.kind is StyleKind.CLASSIC
        assert style.font_size == 12

    def test_invalid_style_not_saved(self, tmp_path):
        path = tmp_path / "config.json"
        with pytest.raises(ConfigurationError, match="broken"):
            set_style("broken", {"horizontal_padding": -1}, path)
        assert not path.exists()

    def test_invalid_entry_in_file_raises(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"styles": {"broken": {"base": "flat", "corner_radius": 4}}}, path)
        with pytest.raises(ConfigurationError, match="broken"):
            get_style("broken", path)

    def test_entry_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"styles": {"odd": "flat"}}, path)
        with pytest.raises(ConfigurationError, match="expected an object"):
            get_style("odd", path)

    def test_builtin_cannot_be_redefined(self, tmp_path):
        with pytest.raises(ConfigurationError, match="built-in"):
            set_style("classic", {"font_size": 12}, tmp_path / "config.json")

    def test_preserves_other_config_keys(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"other_key": "keep_me"}, path)
        set_style("mine", {"min_width": 30}, path)
        config = load_config(path)
        assert config["other_key"] == "keep_me"
        assert config["styles"]["mine"] == {"min_width": 30}

    def test_list_style_names(self, tmp_path):
        path = tmp_path / "config.json"
        assert list_style_names(path) == ["classic", "flat"]
        set_style("zeta", {}, path)
        set_style("alpha", {"base": "flat"}, path)
        assert list_style_names(path) == ["classic", "flat", "alpha", "zeta"]
