"""
Sample Resizer Core host

This example builds a configuration, installs plugins from it, and queries
them by capability.

Usage:
    python -m examples.sample_host

Or with a configuration file:
    RESIZER_CONFIG_FILE=resizer.xml python -m examples.sample_host
"""

import os

from resizer_core import Config
from resizer_core.plugins import (
    FileSignature,
    FileSignatureProvider,
    Plugin,
    identify,
    install_configured_plugins,
)
from resizer_core.settings import get_settings
from resizer_core.utils.logging import setup_logging

SAMPLE_CONFIG = """
<configuration>
  <resizer>
    <plugins>
      <add name="ConfigLicenseReader" />
    </plugins>
    <licenses>
      <license>ABCD-1234</license>
      <license> EFGH
                5678 </license>
    </licenses>
  </resizer>
</configuration>
"""


# Example: signature provider plugin
class ImageSniffer(FileSignatureProvider, Plugin):
    """Recognises a handful of common image formats."""

    @property
    def name(self) -> str:
        return "image-sniffer"

    def get_signatures(self):
        yield FileSignature(b"\x89PNG\r\n\x1a\n", "png", "image/png")
        yield FileSignature(b"\xff\xd8\xff", "jpg", "image/jpeg")
        yield FileSignature(b"GIF8", "gif", "image/gif")


def main() -> None:
    setup_logging(level=get_settings().log_level)

    if os.environ.get("RESIZER_CONFIG_FILE"):
        config = Config.from_settings()
    else:
        config = Config.from_xml(SAMPLE_CONFIG)

    install_configured_plugins(config)
    ImageSniffer().install(config)

    print("Installed plugins:")
    for plugin in config.plugins:
        print(f"  {plugin.get_info()}")

    print(f"\nLicenses: {config.plugins.collect_licenses()}")

    found = identify(b"\x89PNG\r\n\x1a\n\x00\x00", config.plugins.signature_providers())
    print(f"Header identified as: {found.mime_type if found else 'unknown'}")


if __name__ == "__main__":
    main()
