"""
Tests for importer.config_reader
"""

import pytest

from curriculum_importer.importer.config_reader import ConfigError, ConfigReader


def test_get_str_reads_section_less_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "# comment\ntitle = Loops & Lists\nreq = 01_hello, 02_vars\nstar.time.goal = 500\n",
        encoding="utf-8",
    )

    cfg = ConfigReader.from_path(path)

    assert cfg.get_str("title") == "Loops & Lists"
    assert cfg.get_str("req") == "01_hello, 02_vars"
    assert cfg.get_int("star.time.goal") == 500


def test_from_path_when_missing_file_then_empty(tmp_path):
    cfg = ConfigReader.from_path(tmp_path / "absent.ini")

    assert cfg.keys() == []
    assert cfg.get_str("title", "fallback") == "fallback"


def test_keys_are_case_sensitive():
    cfg = ConfigReader.from_string("Title = A\n")

    assert "Title" in cfg
    assert "title" not in cfg


def test_values_are_not_interpolated():
    cfg = ConfigReader.from_string("title = 100% done\n")

    assert cfg.get_str("title") == "100% done"


def test_get_int_when_absent_then_default():
    assert ConfigReader.from_string("").get_int("reward", 10) == 10


def test_get_int_when_not_integer_then_raises_config_error():
    cfg = ConfigReader.from_string("reward = lots\n")

    with pytest.raises(ConfigError, match="not an integer") as exc_info:
        cfg.get_int("reward", 10)
    assert exc_info.value.key == "reward"


def test_from_string_when_unparseable_then_raises_config_error():
    with pytest.raises(ConfigError, match="Cannot parse"):
        ConfigReader.from_string("just a line without separator\n")


def test_from_path_when_not_utf8_then_raises_config_error(tmp_path):
    path = tmp_path / "config.ini"
    path.write_bytes(b"title = caf\xe9\n")

    with pytest.raises(ConfigError, match="UTF-8") as exc_info:
        ConfigReader.from_path(path)
    assert exc_info.value.path == path
