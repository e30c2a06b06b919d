"""Per-configuration plugin registry with a capability index."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING

from resizer_core.exceptions import DuplicatePluginError, PluginError
from resizer_core.plugins.base import Capability, Plugin
from resizer_core.plugins.capabilities import CAPABILITY_METHODS

if TYPE_CHECKING:
    from resizer_core.plugins.capabilities import (
        FileSignature,
        FileSignatureProvider,
        LicenseProvider,
    )

logger = logging.getLogger(__name__)


class DuplicatePolicy(str, Enum):
    """What a registry does with a second plugin carrying a known name."""

    REJECT = "reject"
    REPLACE = "replace"
    ALLOW = "allow"


class PluginRegistry:
    """
    Registry of the plugins installed into one ``Config``.

    Each ``Config`` owns its own registry. Plugins are kept in installation
    order and indexed by the capability tags they declare, so the host asks
    "who provides licenses?" without inspecting plugin types.

    Adding the same instance twice is a no-op. A different instance with an
    already registered name is handled according to ``duplicate_policy``.

    Example:
        ```python
        registry = PluginRegistry()
        registry.add_plugin(reader)

        registry.get("config-license-reader")
        registry.with_capability(Capability.LICENSES)
        registry.collect_licenses()
        ```
    """

    def __init__(
        self, duplicate_policy: DuplicatePolicy | str = DuplicatePolicy.REJECT
    ) -> None:
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._plugins: list[Plugin] = []
        self._by_capability: dict[Capability, list[Plugin]] = {
            capability: [] for capability in Capability
        }

    def add_plugin(self, plugin: Plugin) -> bool:
        """
        Register a plugin.

        Args:
            plugin: The plugin instance to register.

        Returns:
            True if the plugin was added, False if this instance was already
            registered.

        Raises:
            DuplicatePluginError: If another plugin with the same name is
                registered and the policy is ``REJECT``.
            PluginError: If the plugin declares a capability it does not
                implement.
        """
        if plugin in self:
            logger.debug(f"Plugin already registered, ignoring: {plugin.name}")
            return False

        for capability in plugin.capabilities:
            method = CAPABILITY_METHODS[capability]
            if not callable(getattr(plugin, method, None)):
                raise PluginError(
                    plugin.name,
                    f"declares capability '{capability.value}' but has no {method}()",
                )

        existing = [p for p in self._plugins if p.name == plugin.name]
        if existing:
            if self.duplicate_policy is DuplicatePolicy.REJECT:
                raise DuplicatePluginError(plugin.name)
            if self.duplicate_policy is DuplicatePolicy.REPLACE:
                for old in existing:
                    self.remove_plugin(old)
                logger.info(f"Replaced plugin: {plugin.name}")

        self._plugins.append(plugin)
        for capability in plugin.capabilities:
            self._by_capability[capability].append(plugin)
        logger.info(f"Registered plugin: {plugin.name} v{plugin.version}")
        return True

    def remove_plugin(self, plugin: Plugin) -> bool:
        """
        Unregister a plugin instance.

        Returns:
            True if the plugin was registered and has been removed, False if
            it was not found.
        """
        if plugin not in self:
            return False
        self._plugins = [p for p in self._plugins if p is not plugin]
        for capability, plugins in self._by_capability.items():
            self._by_capability[capability] = [p for p in plugins if p is not plugin]
        logger.info(f"Unregistered plugin: {plugin.name}")
        return True

    def get(self, name: str) -> Plugin | None:
        """
        Get the first registered plugin called ``name``.

        Returns:
            The plugin instance, or None if not found.
        """
        for plugin in self._plugins:
            if plugin.name == name:
                return plugin
        return None

    def list_all(self) -> list[Plugin]:
        """List all registered plugins in installation order."""
        return list(self._plugins)

    def with_capability(self, capability: Capability | str) -> list[Plugin]:
        """List registered plugins that declared ``capability``."""
        return list(self._by_capability[Capability(capability)])

    def license_providers(self) -> list[LicenseProvider]:
        """List registered plugins that provide licenses."""
        return self.with_capability(Capability.LICENSES)  # type: ignore[return-value]

    def signature_providers(self) -> list[FileSignatureProvider]:
        """List registered plugins that provide file signatures."""
        return self.with_capability(Capability.FILE_SIGNATURES)  # type: ignore[return-value]

    def collect_licenses(self) -> list[str]:
        """Gather the licenses of every license provider, provider by provider."""
        licenses: list[str] = []
        for provider in self.license_providers():
            licenses.extend(provider.get_licenses())
        return licenses

    def collect_signatures(self) -> list[FileSignature]:
        """Gather the signatures of every signature provider."""
        signatures: list[FileSignature] = []
        for provider in self.signature_providers():
            signatures.extend(provider.get_signatures())
        return signatures

    def clear(self) -> None:
        """Clear all registered plugins."""
        self._plugins.clear()
        for plugins in self._by_capability.values():
            plugins.clear()

    def __contains__(self, plugin: object) -> bool:
        return any(p is plugin for p in self._plugins)

    def __iter__(self) -> Iterator[Plugin]:
        return iter(list(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)
