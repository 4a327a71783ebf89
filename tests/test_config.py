"""
Tests for loading interpreter settings from YAML.
"""

import textwrap

import pytest

from tinyscript import Settings, load_settings, find_settings
from tinyscript.config import CONFIG_FILENAME


def write_config(tmp_path, text, name=CONFIG_FILENAME):
    path = tmp_path / name
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_defaults():
    settings = Settings()
    assert settings.strict_strings is True
    assert settings.recursion_limit == 10000
    assert settings.encoding == "utf-8"


def test_load_settings(tmp_path):
    path = write_config(tmp_path, """
        strict_strings: false
        recursion_limit: 2000
        encoding: latin-1
    """)
    settings = load_settings(path)
    assert settings == Settings(strict_strings=False, recursion_limit=2000, encoding="latin-1")


def test_partial_settings_keep_defaults(tmp_path):
    settings = load_settings(write_config(tmp_path, "recursion_limit: 500\n"))
    assert settings.recursion_limit == 500
    assert settings.strict_strings is True


def test_empty_file_gives_defaults(tmp_path):
    assert load_settings(write_config(tmp_path, "")) == Settings()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="settings file not found"):
        load_settings(tmp_path / "absent.yaml")


def test_unknown_key(tmp_path):
    path = write_config(tmp_path, "strict_strings: true\nmax_loops: 10\n")
    with pytest.raises(ValueError, match="unknown settings: max_loops"):
        load_settings(path)


def test_wrong_type(tmp_path):
    path = write_config(tmp_path, "recursion_limit: lots\n")
    with pytest.raises(ValueError, match="recursion_limit"):
        load_settings(path)


def test_bool_is_not_int(tmp_path):
    path = write_config(tmp_path, "recursion_limit: true\n")
    with pytest.raises(ValueError, match="must be int"):
        load_settings(path)


def test_recursion_limit_floor(tmp_path):
    path = write_config(tmp_path, "recursion_limit: 10\n")
    with pytest.raises(ValueError, match="at least 100"):
        load_settings(path)


def test_not_a_mapping(tmp_path):
    path = write_config(tmp_path, "- strict_strings\n- encoding\n")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_settings(path)


def test_find_settings(tmp_path):
    assert find_settings(tmp_path) is None
    path = write_config(tmp_path, "encoding: utf-8\n")
    assert find_settings(tmp_path) == path
