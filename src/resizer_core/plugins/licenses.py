"""License provider that reads keys from the configuration tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resizer_core.plugins.capabilities import LicenseProvider

if TYPE_CHECKING:
    from resizer_core.config import Config

logger = logging.getLogger(__name__)


LICENSE_WHITESPACE = str.maketrans("", "", " \t\n\r")


def normalize_license(text: str) -> str:
    """Trim, then drop spaces, tabs and line breaks anywhere in the key."""
    return text.strip().translate(LICENSE_WHITESPACE)


class ConfigLicenseReader(LicenseProvider):
    """
    Collects license keys declared in the configuration.

    Reads::

        <licenses>
          <license>ABCD-1234</license>
          <license> EFGH
                    5678 </license>
        </licenses>

    into ``("ABCD-1234", "EFGH5678")``. Keys are pasted by administrators and
    often carry indentation or line breaks, so all whitespace is removed, not
    only the surrounding spaces.

    The collected list only grows: installing again re-reads the tree and
    appends what it finds.
    """

    def __init__(self) -> None:
        super().__init__()
        self._licenses: list[str] = []

    @property
    def name(self) -> str:
        return "config-license-reader"

    @property
    def description(self) -> str:
        return "Reads <license> entries from the <licenses> section"

    def install(self, config: Config) -> ConfigLicenseReader:
        found: list[str] = []
        node = config.get_node("licenses")
        if node is not None:
            for child in node.children_by_name("license"):
                if child.text_contents is not None:
                    found.append(normalize_license(child.text_contents))
        super().install(config)
        # Only a registered reader keeps what it scanned
        self._licenses.extend(found)
        logger.debug(f"Collected {len(found)} license(s) from configuration")
        return self

    def uninstall(self, config: Config) -> bool:
        # Reported as success even when the reader was never installed
        super().uninstall(config)
        return True

    def get_licenses(self) -> tuple[str, ...]:
        return tuple(self._licenses)
