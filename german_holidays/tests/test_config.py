"""Tests for config loading."""

import pytest

from german_holidays.src.config import load_config, package_root


class TestLoadConfig:
    def test_loads_successfully(self):
        cfg = load_config()
        assert "default_region" in cfg
        assert "language" in cfg

    def test_shipped_defaults(self):
        cfg = load_config()
        assert cfg["default_region"] == "BY"
        assert cfg["language"] == "en"

    def test_override(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_region: BE\nlanguage: de\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg["default_region"] == "BE"
        assert cfg["language"] == "de"

    def test_defaults_merged(self, tmp_path):
        """Keys missing from the file fall back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("language: de\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg["default_region"] == "BY"
        assert cfg["language"] == "de"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path)["default_region"] == "BY"

    def test_unknown_region(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_region: XX\n", encoding="utf-8")
        with pytest.raises(ValueError, match="XX"):
            load_config(path)

    def test_unknown_language(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("language: fr\n", encoding="utf-8")
        with pytest.raises(ValueError, match="fr"):
            load_config(path)


class TestPaths:
    def test_package_root_has_config(self):
        assert (package_root() / "config.yaml").exists()
