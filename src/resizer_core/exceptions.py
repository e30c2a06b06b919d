"""Custom exceptions for Resizer Core."""


class ResizerError(Exception):
    """Base exception for all Resizer Core errors."""

    pass


class ConfigurationError(ResizerError):
    """Raised when the configuration tree cannot be read."""

    pass


class PluginError(ResizerError):
    """Raised when there is an error with a plugin."""

    def __init__(self, plugin_name: str, message: str):
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")


class DuplicatePluginError(PluginError):
    """Raised when a registry refuses a second plugin with the same name."""

    def __init__(self, plugin_name: str):
        super().__init__(plugin_name, "is already registered")
