"""Tests for ObjkitConfig."""

import pytest

from objkit.config import ObjkitConfig


class TestDefaults:
    def test_defaults(self):
        config = ObjkitConfig()
        assert config.json_indent is None
        assert config.json_sort_keys is False
        assert config.log_level == "WARNING"

    def test_frozen(self):
        config = ObjkitConfig()
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"  # type: ignore[misc]


class TestFromEnv:
    def test_empty_environment(self):
        assert ObjkitConfig.from_env({}) == ObjkitConfig()

    def test_all_variables(self):
        config = ObjkitConfig.from_env(
            {
                "OBJKIT_JSON_INDENT": "4",
                "OBJKIT_JSON_SORT_KEYS": "yes",
                "OBJKIT_LOG_LEVEL": "debug",
            }
        )
        assert config == ObjkitConfig(json_indent=4, json_sort_keys=True, log_level="DEBUG")

    def test_sort_keys_false_values(self):
        assert ObjkitConfig.from_env({"OBJKIT_JSON_SORT_KEYS": "0"}).json_sort_keys is False

    def test_bad_indent(self):
        with pytest.raises(ValueError):
            ObjkitConfig.from_env({"OBJKIT_JSON_INDENT": "wide"})

    def test_bad_indent_names_variable(self):
        with pytest.raises(ValueError, match="OBJKIT_JSON_INDENT"):
            ObjkitConfig.from_env({"OBJKIT_JSON_INDENT": "2.5"})

    @pytest.mark.parametrize("level", ["BASIC_FORMAT", "loud", "Level 5"])
    def test_unknown_log_level(self, level):
        with pytest.raises(ValueError, match="OBJKIT_LOG_LEVEL"):
            ObjkitConfig.from_env({"OBJKIT_LOG_LEVEL": level})

    def test_log_level_number(self):
        assert ObjkitConfig.from_env({"OBJKIT_LOG_LEVEL": "info"}).log_level_number == 20
        assert ObjkitConfig().log_level_number == 30

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("OBJKIT_JSON_INDENT", "2")
        assert ObjkitConfig.from_env().json_indent == 2
