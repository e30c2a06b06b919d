"""Utility helpers for Resizer Core."""

from resizer_core.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
