"""Tests for settings, configuration tree and Config."""

import logging

import pytest

from resizer_core.config import Config
from resizer_core.exceptions import ConfigurationError
from resizer_core.node import Node
from resizer_core.plugins.registry import DuplicatePolicy
from resizer_core.settings import ResizerSettings, get_settings, set_settings
from resizer_core.utils.logging import get_logger, setup_logging


class TestResizerSettings:
    """Tests for ResizerSettings."""

    def setup_method(self):
        set_settings(None)

    def teardown_method(self):
        set_settings(None)

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RESIZER_CONFIG_FILE", raising=False)
        monkeypatch.delenv("RESIZER_DUPLICATE_PLUGINS", raising=False)
        settings = ResizerSettings(_env_file=None)

        assert settings.config_file is None
        assert settings.duplicate_plugins == "reject"
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RESIZER_DUPLICATE_PLUGINS", "allow")
        monkeypatch.setenv("RESIZER_CONFIG_FILE", str(tmp_path / "resizer.xml"))

        settings = ResizerSettings(_env_file=None)

        assert settings.duplicate_plugins == "allow"
        assert settings.config_file == tmp_path / "resizer.xml"

    def test_invalid_policy_rejected(self):
        with pytest.raises(ValueError):
            ResizerSettings(_env_file=None, duplicate_plugins="ignore")

    def test_global_settings(self):
        settings = ResizerSettings(_env_file=None, log_level="DEBUG")
        set_settings(settings)

        assert get_settings() is settings


class TestNode:
    """Tests for the configuration tree."""

    def test_parse(self):
        root = Node.parse(
            "<resizer><licenses><license>A</license><license>B</license>"
            "</licenses></resizer>"
        )

        assert root.name == "resizer"
        licenses = root.first_child("licenses")
        assert [c.text_contents for c in licenses.children_by_name("license")] == [
            "A",
            "B",
        ]

    def test_names_are_case_insensitive(self):
        root = Node.parse("<resizer><Licenses><LICENSE>A</LICENSE></Licenses></resizer>")

        licenses = root.first_child("licenses")
        assert licenses is not None
        assert len(licenses.children_by_name("license")) == 1

    def test_missing_child(self):
        root = Node.parse("<resizer />")

        assert root.first_child("licenses") is None
        assert root.children_by_name("licenses") == []

    def test_empty_element_has_no_text(self):
        root = Node.parse("<resizer><license /><license></license></resizer>")

        assert [c.text_contents for c in root.children] == [None, None]

    def test_attributes(self):
        root = Node.parse("<resizer><add Name='ConfigLicenseReader' /></resizer>")

        entry = root.children[0]
        assert entry.get("name") == "ConfigLicenseReader"
        assert entry.get("missing") is None
        assert entry.get("missing", "x") == "x"

    def test_text_between_children_counts(self):
        root = Node.parse("<resizer><license>AB<b>XX</b>CD</license></resizer>")

        assert root.children[0].text_contents == "ABCD"

    def test_text_only_after_child(self):
        root = Node.parse("<resizer><license><b />CD</license></resizer>")

        assert root.children[0].text_contents == "CD"

    def test_malformed_xml(self):
        with pytest.raises(ConfigurationError, match="Malformed"):
            Node.parse("<resizer><licenses></resizer>")


class TestConfig:
    """Tests for Config."""

    def setup_method(self):
        self.settings = ResizerSettings(_env_file=None)

    def test_empty_config(self):
        config = Config(settings=self.settings)

        assert config.root.name == "resizer"
        assert config.get_node("licenses") is None
        assert len(config.plugins) == 0

    def test_get_node(self):
        config = Config.from_xml(
            "<resizer><licenses /><plugins /></resizer>", settings=self.settings
        )

        assert config.get_node("plugins").name == "plugins"
        assert config.get_node("nothing") is None

    def test_wrapped_section(self):
        config = Config.from_xml(
            "<configuration><resizer><licenses><license>A</license></licenses>"
            "</resizer></configuration>",
            settings=self.settings,
        )

        assert config.root.name == "resizer"
        assert config.get_node("licenses") is not None

    def test_registry_follows_settings(self):
        settings = ResizerSettings(_env_file=None, duplicate_plugins="replace")
        config = Config(settings=settings)

        assert config.plugins.duplicate_policy is DuplicatePolicy.REPLACE

    def test_from_file(self, tmp_path):
        path = tmp_path / "resizer.xml"
        path.write_text(
            "<resizer><licenses><license>A</license></licenses></resizer>",
            encoding="utf-8",
        )

        config = Config.from_file(path, settings=self.settings)

        assert config.get_node("licenses") is not None

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            Config.from_file(tmp_path / "missing.xml", settings=self.settings)

    def test_from_settings_with_file(self, tmp_path):
        path = tmp_path / "resizer.xml"
        path.write_text("<resizer><plugins /></resizer>", encoding="utf-8")
        settings = ResizerSettings(_env_file=None, config_file=path)

        config = Config.from_settings(settings)

        assert config.settings is settings
        assert config.get_node("plugins") is not None

    def test_from_settings_without_file(self):
        config = Config.from_settings(self.settings)

        assert config.get_node("plugins") is None


class TestLogging:
    """Tests for logging helpers."""

    def test_setup_logging(self):
        logger = setup_logging(level="DEBUG")

        assert logger.name == "resizer_core"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        setup_logging(level="WARNING")
        assert len(logger.handlers) == 1

        setup_logging(level="WARNING", stream=False)
        assert logger.handlers == []

    def test_setup_logging_from_settings(self):
        settings = ResizerSettings(_env_file=None, log_level="debug")

        logger = setup_logging(level=settings.log_level, stream=False)

        assert logger.level == logging.DEBUG

    def test_get_logger(self):
        assert get_logger("plugins").name == "resizer_core.plugins"
