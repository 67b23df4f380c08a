from __future__ import annotations

from pathlib import Path

import pytest

from filesort.utils import env_bool, env_str, expand_env, load_yaml_file, parse_env_bool, read_input_list


class TestParseEnvBool:
    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_true_values(self, value: str) -> None:
        assert parse_env_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "False", "no", "OFF"])
    def test_false_values(self, value: str) -> None:
        assert parse_env_bool(value) is False

    def test_unrecognized(self) -> None:
        assert parse_env_bool("sometimes") is None
        assert parse_env_bool(None) is None


def test_env_bool_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILESORT_TEST_FLAG", "true")
    assert env_bool("FILESORT_TEST_FLAG") is True
    monkeypatch.delenv("FILESORT_TEST_FLAG")
    assert env_bool("FILESORT_TEST_FLAG") is None


def test_env_str_strips_and_drops_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILESORT_TEST_VALUE", "  plain ")
    assert env_str("FILESORT_TEST_VALUE") == "plain"
    monkeypatch.setenv("FILESORT_TEST_VALUE", "   ")
    assert env_str("FILESORT_TEST_VALUE") is None


def test_expand_env_nested(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILESORT_DIR", "/data")
    data = {"inputs": ["$FILESORT_DIR/a.txt"], "count": 3}
    assert expand_env(data) == {"inputs": ["/data/a.txt"], "count": 3}


def test_load_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("inputs:\n  - a.txt\n", encoding="utf-8")
    assert load_yaml_file(path) == {"inputs": ["a.txt"]}


class TestReadInputList:
    """Test read_input_list function."""

    def test_skips_blank_and_comment_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "files.txt"
        path.write_text("# batch\nreport.pdf\n\n  song.mp3  \n#ignored.zip\nreadme\n", encoding="utf-8")
        assert read_input_list(path) == ["report.pdf", "song.mp3", "readme"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "files.txt"
        path.write_text("", encoding="utf-8")
        assert read_input_list(path) == []

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_input_list(tmp_path / "missing.txt")
