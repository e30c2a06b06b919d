"""Plugin system for Resizer Core."""

from resizer_core.plugins.base import Capability, Plugin
from resizer_core.plugins.capabilities import (
    FileSignature,
    FileSignatureProvider,
    LicenseProvider,
    identify,
)
from resizer_core.plugins.licenses import ConfigLicenseReader, normalize_license
from resizer_core.plugins.loader import (
    discover_plugins,
    install_configured_plugins,
    load_plugin,
)
from resizer_core.plugins.registry import DuplicatePolicy, PluginRegistry

__all__ = [
    "Capability",
    "ConfigLicenseReader",
    "DuplicatePolicy",
    "FileSignature",
    "FileSignatureProvider",
    "LicenseProvider",
    "Plugin",
    "PluginRegistry",
    "discover_plugins",
    "identify",
    "install_configured_plugins",
    "load_plugin",
    "normalize_license",
]
