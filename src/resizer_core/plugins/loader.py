"""Plugin discovery and loading for Resizer Core."""

from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any

from resizer_core.exceptions import PluginError
from resizer_core.plugins.base import Plugin

if TYPE_CHECKING:
    from resizer_core.config import Config

logger = logging.getLogger(__name__)

# Entry point group for plugins
PLUGIN_ENTRY_POINT_GROUP = "resizer_core.plugins"

# Short names accepted in <plugins><add name="..."/></plugins>
BUILTIN_PLUGINS: dict[str, str] = {
    "ConfigLicenseReader": "resizer_core.plugins.licenses:ConfigLicenseReader",
}


def discover_plugins() -> list[Plugin]:
    """
    Instantiate all plugins advertised through entry points.

    Looks for plugins registered under the 'resizer_core.plugins' entry point
    group in installed packages. Discovered plugins are not installed; the
    host decides which ``Config`` they go into.

    Returns:
        A list of discovered Plugin instances.

    Example:
        In a plugin package's pyproject.toml:
        ```toml
        [project.entry-points."resizer_core.plugins"]
        my_plugin = "my_package.plugins:MyPlugin"
        ```

        Then in your code:
        ```python
        for plugin in discover_plugins():
            plugin.install(config)
        ```
    """
    discovered: list[Plugin] = []

    for ep in entry_points(group=PLUGIN_ENTRY_POINT_GROUP):
        try:
            discovered.append(load_plugin(ep.name, ep.value))
        except PluginError as e:
            logger.warning(f"Failed to load plugin '{ep.name}': {e}")

    return discovered


def load_plugin(name: str, class_path: str, **kwargs: Any) -> Plugin:
    """
    Load and instantiate a plugin from a class path.

    Args:
        name: Name used in error messages.
        class_path: The full class path (e.g., 'my_package.plugins:MyPlugin'),
            or the short name of a built-in plugin.
        **kwargs: Passed to the plugin constructor.

    Returns:
        The new Plugin instance.

    Raises:
        PluginError: If the class cannot be found, is not a Plugin subclass,
            or instantiation fails.
    """
    class_path = BUILTIN_PLUGINS.get(class_path, class_path)

    if ":" in class_path:
        module_path, class_name = class_path.rsplit(":", 1)
    else:
        # Assume the last component is the class name
        parts = class_path.rsplit(".", 1)
        if len(parts) != 2:
            raise PluginError(name, f"Invalid class path: {class_path}")
        module_path, class_name = parts

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise PluginError(name, f"Cannot import '{module_path}': {e}") from e

    plugin_class = getattr(module, class_name, None)
    if plugin_class is None:
        raise PluginError(
            name, f"Class '{class_name}' not found in module '{module_path}'"
        )

    if not isinstance(plugin_class, type) or not issubclass(plugin_class, Plugin):
        raise PluginError(name, f"Class '{class_name}' is not a Plugin subclass")

    try:
        return plugin_class(**kwargs)
    except Exception as e:
        raise PluginError(name, f"Failed to instantiate: {e}") from e


def install_configured_plugins(config: Config) -> list[Plugin]:
    """
    Install the plugins listed in the configuration.

    Walks the ``<plugins>`` section in document order::

        <plugins>
          <add name="ConfigLicenseReader" />
          <add name="my_package.plugins:PngSniffer" />
          <remove name="png-sniffer" />
          <clear />
        </plugins>

    ``add`` loads and installs a plugin, ``remove`` uninstalls registered
    plugins whose name or class name matches, ``clear`` empties the registry.
    Entries that fail to load or install are logged and skipped.

    Args:
        config: The configuration to read and install into.

    Returns:
        Plugins installed by ``add`` entries, in document order.
    """
    installed: list[Plugin] = []
    section = config.get_node("plugins")
    if section is None:
        return installed

    for entry in section.children:
        action = entry.name.lower()
        if action == "clear":
            config.plugins.clear()
            installed.clear()
            continue

        name = entry.get("name")
        if not name:
            logger.warning(f"Skipping <{entry.name}> entry without a name attribute")
            continue

        if action == "add":
            try:
                plugin = load_plugin(name, name).install(config)
            except PluginError as e:
                logger.warning(f"Failed to install plugin '{name}': {e}")
                continue
            installed.append(plugin)
        elif action == "remove":
            class_name = name.rsplit(":", 1)[-1].rsplit(".", 1)[-1]
            for plugin in config.plugins.list_all():
                if plugin.name == name or type(plugin).__name__ == class_name:
                    plugin.uninstall(config)
                    installed = [p for p in installed if p is not plugin]
        else:
            logger.warning(f"Unknown plugin entry <{entry.name}>, skipping")

    return installed
