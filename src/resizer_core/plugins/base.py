"""Plugin base class and capability tags for Resizer Core."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resizer_core.config import Config

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Optional behaviour a plugin can advertise to the host."""

    FILE_SIGNATURES = "file_signatures"
    LICENSES = "licenses"


class Plugin(ABC):
    """
    Base class for all Resizer plugins.

    A plugin attaches itself to a ``Config`` through ``install`` and detaches
    through ``uninstall``. Capabilities are declared up front, either through
    the ``CAPABILITIES`` class attribute or the ``capabilities`` constructor
    argument, and the host looks plugins up by those tags.

    Example:
        ```python
        from resizer_core.plugins import Capability, FileSignature, Plugin

        class PngSniffer(Plugin):
            CAPABILITIES = frozenset({Capability.FILE_SIGNATURES})

            @property
            def name(self) -> str:
                return "png-sniffer"

            def get_signatures(self):
                yield FileSignature(b"\\x89PNG", "png", "image/png")

        plugin = PngSniffer().install(config)
        ```
    """

    CAPABILITIES: frozenset[Capability] = frozenset()

    def __init__(self, capabilities: Iterable[Capability] | None = None) -> None:
        if capabilities is None:
            # Every capability interface in the hierarchy contributes its tags
            capabilities = frozenset().union(
                *(vars(cls).get("CAPABILITIES", ()) for cls in type(self).__mro__)
            )
        self._capabilities = frozenset(Capability(c) for c in capabilities)

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Unique identifier for this plugin.

        Returns:
            A unique string name for the plugin.
        """
        pass

    @property
    def description(self) -> str:
        """
        Description of what this plugin does.

        Returns:
            A human-readable description.
        """
        return ""

    @property
    def version(self) -> str:
        """
        Version of this plugin.

        Returns:
            A version string (e.g., "1.0.0").
        """
        return "0.1.0"

    @property
    def capabilities(self) -> frozenset[Capability]:
        """Capability tags this plugin declared at construction."""
        return self._capabilities

    def install(self, config: Config) -> Plugin:
        """
        Attach this plugin to ``config``.

        Subclasses doing setup should read what they need from ``config``
        first and then call ``super().install(config)``.

        Args:
            config: The shared host configuration.

        Returns:
            This plugin, so installs can be chained.
        """
        config.plugins.add_plugin(self)
        logger.debug(f"Installed plugin: {self.name}")
        return self

    def uninstall(self, config: Config) -> bool:
        """
        Detach this plugin from ``config``.

        Args:
            config: The shared host configuration.

        Returns:
            True if the plugin was registered and has been removed, False if
            it was not installed.
        """
        removed = config.plugins.remove_plugin(self)
        if removed:
            logger.debug(f"Uninstalled plugin: {self.name}")
        return removed

    def get_info(self) -> dict[str, str]:
        """Get plugin information as a dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "capabilities": ",".join(sorted(c.value for c in self.capabilities)),
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
