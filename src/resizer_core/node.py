"""Read-only view over the host configuration tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from resizer_core.exceptions import ConfigurationError


@dataclass
class Node:
    """
    One element of the configuration tree.

    Names and attribute keys are matched case-insensitively, the way
    administrators tend to write hand-edited configuration.

    Example:
        ```python
        root = Node.parse("<resizer><licenses><license>AB</license></licenses></resizer>")
        licenses = root.first_child("licenses")
        [child.text_contents for child in licenses.children_by_name("license")]
        # ['AB']
        ```
    """

    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    text_contents: str | None = None

    def children_by_name(self, name: str) -> list[Node]:
        """Return direct children called ``name``, in document order."""
        wanted = name.lower()
        return [child for child in self.children if child.name.lower() == wanted]

    def first_child(self, name: str) -> Node | None:
        """Return the first direct child called ``name``, or None."""
        matches = self.children_by_name(name)
        return matches[0] if matches else None

    def get(self, attr: str, default: str | None = None) -> str | None:
        """Look up an attribute value."""
        wanted = attr.lower()
        for key, value in self.attrs.items():
            if key.lower() == wanted:
                return value
        return default

    @classmethod
    def from_element(cls, element: ET.Element) -> Node:
        """Build a node tree from an ElementTree element."""
        return cls(
            name=element.tag,
            attrs=dict(element.attrib),
            children=[cls.from_element(child) for child in element],
            text_contents=_own_text(element),
        )

    @classmethod
    def parse(cls, xml_text: str) -> Node:
        """
        Parse an XML document into a node tree.

        Raises:
            ConfigurationError: If the document is not well-formed.
        """
        try:
            element = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise ConfigurationError(f"Malformed configuration: {e}") from e
        return cls.from_element(element)


def _own_text(element: ET.Element) -> str | None:
    """Text directly inside ``element``, including text between its children."""
    parts = [element.text, *(child.tail for child in element)]
    if all(part is None for part in parts):
        return None
    return "".join(part for part in parts if part is not None)
