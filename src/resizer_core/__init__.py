"""Resizer Core - plugin host with capability discovery."""

from resizer_core.config import Config
from resizer_core.settings import ResizerSettings

__version__ = "0.1.0"
__all__ = ["Config", "ResizerSettings", "__version__"]
