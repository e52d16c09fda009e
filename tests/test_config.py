"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from perflimit.config import PerfLimitConfig, default_config_path, load_config


class TestDefaults:
    def test_no_file(self):
        cfg = load_config()
        assert cfg == PerfLimitConfig()
        assert cfg.reader == "devmem2"
        assert cfg.reader_args == ("w",)
        assert cfg.timeout_s == 5.0
        assert cfg.color == "auto"

    def test_default_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PERFLIMIT_CONFIG", str(tmp_path / "x.yaml"))
        assert default_config_path() == tmp_path / "x.yaml"

    def test_default_path_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv("PERFLIMIT_CONFIG")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_config_path() == tmp_path / "perflimit" / "config.yaml"


class TestYamlFile:
    def test_full_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("reader: busybox\nreader_args: [devmem]\ntimeout_s: 2\ncolor: never\n")
        cfg = load_config(path)
        assert cfg.reader == "busybox"
        assert cfg.reader_args == ("devmem",)
        assert cfg.timeout_s == 2.0
        assert cfg.color == "never"

    def test_default_location_used(self, monkeypatch, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("color: always\n")
        monkeypatch.setenv("PERFLIMIT_CONFIG", str(path))
        assert load_config().color == "always"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == PerfLimitConfig()

    def test_empty_reader_args(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("reader_args:\n")
        assert load_config(path).reader_args == ()

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="expected mapping"):
            load_config(path)

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("reader: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid config file"):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("colour: never\n")
        with pytest.raises(ValueError, match="unknown keys: colour"):
            load_config(path)

    def test_bad_color(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("color: rainbow\n")
        with pytest.raises(ValueError, match="color must be one of"):
            load_config(path)

    def test_bad_timeout(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("timeout_s: soon\n")
        with pytest.raises(ValueError, match="timeout_s must be a number"):
            load_config(path)

    def test_non_positive_timeout(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("timeout_s: 0\n")
        with pytest.raises(ValueError, match="positive"):
            load_config(path)

    def test_reader_args_not_list(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("reader_args: w\n")
        with pytest.raises(ValueError, match="must be a list"):
            load_config(path)


class TestPrecedence:
    def test_env_beats_file(self, monkeypatch, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("reader: busybox\ncolor: never\n")
        monkeypatch.setenv("PERFLIMIT_READER", "/opt/bin/devmem2")
        monkeypatch.setenv("PERFLIMIT_COLOR", "ALWAYS")
        cfg = load_config(path)
        assert cfg.reader == "/opt/bin/devmem2"
        assert cfg.color == "always"

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("PERFLIMIT_COLOR", "always")
        cfg = load_config().with_overrides(color="never", reader=None)
        assert cfg.color == "never"
        assert cfg.reader == "devmem2"

    def test_override_validated(self):
        with pytest.raises(ValueError):
            PerfLimitConfig().with_overrides(color="rainbow")
