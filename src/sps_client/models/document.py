"""Attributed document tree exchanged with the gateway.

A node is either a ``Text`` leaf or an ``Element`` holding an attribute set
and an ordered mapping of child tag to child node. A ``Document`` adds the
root tag and the XML declaration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union

XML_VERSION = "1.0"
XML_ENCODING = "Shift_JIS"


@dataclass(frozen=True)
class Text:
    """Leaf node holding a single text value."""

    value: str


@dataclass
class Element:
    """Container node: attributes plus ordered children keyed by tag."""

    children: dict[str, "Node"] = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)

    def get(self, tag: str) -> "Node | None":
        return self.children.get(tag)

    def text(self, *path: str) -> str | None:
        """
        Return the text of the leaf found by walking ``path``.

        Returns None when any step is missing or the final node is not a
        leaf.
        """
        node: Node | None = self
        for tag in path:
            if not isinstance(node, Element):
                return None
            node = node.children.get(tag)
        if isinstance(node, Text):
            return node.value
        return None


Node = Union[Text, Element]

FieldValue = Union[str, Text, Element, Mapping[str, "FieldValue"]]


def to_node(value: FieldValue) -> Node:
    """
    Convert a plain field value into a tree node.

    Strings become ``Text`` leaves, mappings become ``Element`` containers
    (recursively) and existing nodes pass through unchanged.
    """
    if isinstance(value, (Text, Element)):
        return value
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, Mapping):
        return Element(children={tag: to_node(child) for tag, child in value.items()})
    raise TypeError(f"Unsupported field value type: {type(value).__name__}")


@dataclass
class Document:
    """
    Top-level document: root tag, root element and declaration.

    ``version`` and ``encoding`` map to the ``<?xml ...?>`` declaration.
    Requests always use version 1.0 with Shift_JIS.
    """

    root_tag: str
    root: Element
    version: str = XML_VERSION
    encoding: str = XML_ENCODING
