"""Unit tests for font_cycle.config and font_cycle.targets."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from font_cycle import CodepointRange, Config, ConfigError, FontCycler, NamedTarget, RecordingHost
from font_cycle.config import CONFIG_ENV_VAR, default_config_path
from font_cycle.targets import parse_target, parse_targets


class TestParseTarget:
    """Tests for turning configuration values into targets."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("latin", NamedTarget("latin")),
            ("  Han ", NamedTarget("han")),
            ("U+2500..U+257F", CodepointRange(0x2500, 0x257F)),
            ("0x2500-0x257f", CodepointRange(0x2500, 0x257F)),
            ("2500..257F", CodepointRange(0x2500, 0x257F)),
            ([0x2500, 0x257F], CodepointRange(0x2500, 0x257F)),
            (("U+2500", "257F"), CodepointRange(0x2500, 0x257F)),
        ],
    )
    def test_accepted_forms(self, value, expected) -> None:
        assert parse_target(value) == expected

    @pytest.mark.parametrize("value", ["", 42, [1, 2, 3], [True, 5], ["zz", "10"]])
    def test_rejected_forms(self, value) -> None:
        with pytest.raises(ConfigError):
            parse_target(value)

    def test_single_value_is_wrapped(self) -> None:
        assert parse_targets("latin") == [NamedTarget("latin")]
        assert parse_targets((1, 2)) == [CodepointRange(1, 2)]

    def test_bare_pair_list_or_tuple_is_one_range(self) -> None:
        """A bare integer pair means the same range as a list or a tuple."""
        expected = [CodepointRange(0x2500, 0x257F)]
        assert parse_targets([0x2500, 0x257F]) == expected
        assert parse_targets((0x2500, 0x257F)) == expected

    def test_pair_of_targets_is_not_a_range(self) -> None:
        assert parse_targets(["latin", "greek"]) == [NamedTarget("latin"), NamedTarget("greek")]
        assert parse_targets([[1, 2], [3, 4]]) == [CodepointRange(1, 2), CodepointRange(3, 4)]

    def test_parsed_targets_are_target_types(self) -> None:
        for value in ("latin", "U+0041..U+005A"):
            assert isinstance(parse_target(value), (NamedTarget, CodepointRange))

    def test_range_membership_and_label(self) -> None:
        box = CodepointRange(0x2500, 0x257F)
        assert 0x2510 in box
        assert 0x2600 not in box
        assert str(box) == "U+2500..U+257F"


class TestConfigLoad:
    """Tests for Config.load and Config.from_dict."""

    def test_load_file(self, config_file: Path) -> None:
        config = Config.load(config_file)
        assert config.path == config_file
        assert config.size_scale == 1.5
        assert config.base_size == 10.0
        assert [s.key for s in config.specs] == ["l", "h"]
        assert config.specs[0].fonts == ["Alpha Sans", "Beta Mono", "Missing Font"]
        assert config.specs[0].targets == [
            NamedTarget("latin"),
            CodepointRange(0x2500, 0x257F),
        ]

    def test_missing_default_file_gives_defaults(self, tmp_path: Path) -> None:
        with patch.dict("os.environ", {CONFIG_ENV_VAR: str(tmp_path / "none.yaml")}):
            config = Config.load()
        assert config.specs == []
        assert config.size_scale == 1.0

    def test_missing_explicit_file_is_an_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            Config.load(tmp_path / "none.yaml")

    def test_env_var_sets_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.yaml"
        with patch.dict("os.environ", {CONFIG_ENV_VAR: str(custom)}):
            assert default_config_path() == custom

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("specs: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.load(path)

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"specs": [{"fonts": ["A"]}]},
            {"specs": [{"key": "l", "fonts": [1, 2]}]},
            {"specs": [{"key": "l", "targets": [[1, 2, 3]]}]},
            {"size_scale": 0},
            {"base_size": "large"},
            {"keys": {"jump": ["x"]}},
            {"keys": {"__class__": ["x"]}},
            {"keys": ["n", "p"]},
        ],
    )
    def test_invalid_content(self, data) -> None:
        with pytest.raises(ConfigError):
            Config.from_dict(data)

    def test_key_bindings_override(self) -> None:
        config = Config.from_dict({"keys": {"next": "l", "cancel": ["x", "\x1b"]}})
        assert config.keys.next == ["l"]
        assert config.keys.cancel == ["x", "\x1b"]
        assert "p" in config.keys.previous

    def test_entries_feed_configure(self, config_file: Path) -> None:
        """Entries load into a cycler; the missing font is dropped."""
        host = RecordingHost(["Alpha Sans", "Beta Mono", "Gamma CJK"])
        cycler = FontCycler.from_config(host, Config.load(config_file))
        assert cycler.spec("l").resources == ["Alpha Sans", "Beta Mono"]
        assert cycler.spec("h").resources == ["Gamma CJK"]
        assert cycler.applier.size_scale == 1.5
