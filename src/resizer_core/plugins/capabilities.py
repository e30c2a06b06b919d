"""Capability interfaces a plugin may implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable
from dataclasses import dataclass

from resizer_core.plugins.base import Capability, Plugin

# Method each capability tag obliges a plugin to provide
CAPABILITY_METHODS: dict[Capability, str] = {
    Capability.FILE_SIGNATURES: "get_signatures",
    Capability.LICENSES: "get_licenses",
}


@dataclass(frozen=True)
class FileSignature:
    """
    Byte pattern identifying a file format.

    Attributes:
        signature: Bytes expected in the file header.
        extension: Primary file extension, without the dot.
        mime_type: MIME type of the format.
        offset: Position of ``signature`` in the header.
    """

    signature: bytes
    extension: str
    mime_type: str
    offset: int = 0

    def __post_init__(self) -> None:
        if not self.signature:
            raise ValueError("File signature must not be empty")
        if self.offset < 0:
            raise ValueError(f"Signature offset must be >= 0, got {self.offset}")

    def matches(self, header: bytes) -> bool:
        """Return True if ``header`` carries this signature."""
        end = self.offset + len(self.signature)
        return header[self.offset:end] == self.signature


class FileSignatureProvider(ABC):
    """
    A plugin able to identify files by their leading bytes.

    ``get_signatures`` must return a finite iterable that can be walked
    again on each call (a generator function or a cached tuple both do).
    A provider with nothing to offer returns an empty iterable.
    """

    CAPABILITIES: frozenset[Capability] = frozenset({Capability.FILE_SIGNATURES})

    @abstractmethod
    def get_signatures(self) -> Iterable[FileSignature]:
        """Return the signatures this plugin recognises."""
        pass


class LicenseProvider(Plugin):
    """
    A plugin holding license strings for the plugins of its ``Config``.

    ``get_licenses`` is a pure accessor: it does no I/O and leaves the
    configuration untouched. Order follows collection order and duplicates
    are kept.
    """

    CAPABILITIES: frozenset[Capability] = frozenset({Capability.LICENSES})

    @abstractmethod
    def get_licenses(self) -> Collection[str]:
        """Return all licenses collected for this configuration."""
        pass


def identify(
    header: bytes, providers: Iterable[FileSignatureProvider]
) -> FileSignature | None:
    """
    Find the first signature matching ``header``.

    Args:
        header: Leading bytes of the file.
        providers: Signature providers, consulted in order.

    Returns:
        The matching signature, or None if no provider recognises the bytes.
    """
    for provider in providers:
        for signature in provider.get_signatures():
            if signature.matches(header):
                return signature
    return None
