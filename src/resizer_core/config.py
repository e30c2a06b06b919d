"""Host configuration object that plugins install into."""

from __future__ import annotations

import logging
from pathlib import Path

from resizer_core.exceptions import ConfigurationError
from resizer_core.node import Node
from resizer_core.plugins.registry import PluginRegistry
from resizer_core.settings import ResizerSettings, get_settings

logger = logging.getLogger(__name__)

SECTION_NAME = "resizer"


class Config:
    """
    Shared configuration for one host instance.

    Wraps the ``<resizer>`` section of the configuration document and owns
    the registry plugins install themselves into.

    Example:
        ```python
        from resizer_core import Config
        from resizer_core.plugins import ConfigLicenseReader

        config = Config.from_xml(
            "<resizer><licenses><license>AB CD</license></licenses></resizer>"
        )
        ConfigLicenseReader().install(config)
        config.plugins.collect_licenses()  # ['ABCD']
        ```
    """

    def __init__(
        self, root: Node | None = None, settings: ResizerSettings | None = None
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.root = root if root is not None else Node(name=SECTION_NAME)
        self.plugins = PluginRegistry(self.settings.duplicate_plugins)

    def get_node(self, name: str) -> Node | None:
        """
        Get a top-level node of the section.

        Args:
            name: Node name, matched case-insensitively.

        Returns:
            The first matching node, or None if the section has none.
        """
        return self.root.first_child(name)

    @classmethod
    def from_xml(
        cls, xml_text: str, settings: ResizerSettings | None = None
    ) -> Config:
        """
        Build a configuration from an XML document.

        The document may be the ``<resizer>`` section itself or any wrapper
        element with a ``<resizer>`` child.

        Raises:
            ConfigurationError: If the document is malformed.
        """
        root = Node.parse(xml_text)
        if root.name.lower() != SECTION_NAME:
            section = root.first_child(SECTION_NAME)
            if section is not None:
                root = section
        return cls(root=root, settings=settings)

    @classmethod
    def from_file(
        cls, path: str | Path, settings: ResizerSettings | None = None
    ) -> Config:
        """
        Build a configuration from an XML file.

        Raises:
            ConfigurationError: If the file cannot be read or is malformed.
        """
        path = Path(path)
        try:
            xml_text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        logger.info(f"Loaded configuration from {path}")
        return cls.from_xml(xml_text, settings=settings)

    @classmethod
    def from_settings(cls, settings: ResizerSettings | None = None) -> Config:
        """Build a configuration from ``settings.config_file``, or an empty one."""
        settings = settings if settings is not None else get_settings()
        if settings.config_file is None:
            return cls(settings=settings)
        return cls.from_file(settings.config_file, settings=settings)
