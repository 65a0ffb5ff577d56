"""
Markup helpers on top of :py:mod:`xml.etree.ElementTree`.

Layers build their output as plain ElementTree elements. Attribute values
are stringified here so that callers can pass integers and floats.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

ET.register_namespace("", SVG_NS)


def format_value(value: Any) -> str:
    """Format an attribute value the way it should read in markup.

    Integral floats drop their fraction, so ``45.0`` becomes ``"45"``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def element(tag: str, children: Iterable[ET.Element] = (), **attrib: Any) -> ET.Element:
    """Create an element.

    Keyword names use ``_`` in place of ``-``, e.g. ``clip_path`` is written
    as ``clip-path``. ``None`` values are skipped.

    Example::

        rect = element("rect", width=100, height=100, x=0, y=0, fill="red")
    """
    node = ET.Element(tag)
    for key, value in attrib.items():
        if value is None:
            continue
        node.set(key.replace("_", "-"), format_value(value))
    node.extend(children)
    return node


def tostring(node: ET.Element) -> str:
    """Serialize an element tree to a unicode string."""
    return ET.tostring(node, encoding="unicode")


def fromstring(text: str) -> ET.Element:
    """Parse markup, dropping whitespace-only text and tails."""
    node = ET.fromstring(text.strip())
    strip_whitespace(node)
    return node


def strip_whitespace(node: ET.Element) -> None:
    """Trim text and tail of every element in place."""
    for item in node.iter():
        if item.text is not None:
            item.text = item.text.strip() or None
        if item.tail is not None:
            item.tail = item.tail.strip() or None


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from a tag."""
    return tag.rsplit("}", 1)[-1]


def canonical(node: ET.Element) -> tuple:
    """
    Order-insensitive (for attributes) representation of an element tree.

    Namespaces are ignored, so a parsed ``<svg xmlns="...">`` compares equal
    to an element built with the plain ``svg`` tag.
    """
    return (
        local_name(node.tag),
        tuple(sorted(node.attrib.items())),
        (node.text or "").strip(),
        tuple(canonical(child) for child in node),
    )


def find_all(node: ET.Element, name: str) -> list:
    """Find descendants (and self) by local tag name."""
    return [item for item in node.iter() if local_name(item.tag) == name]


def find(node: ET.Element, name: str) -> Optional[ET.Element]:
    """Find the first descendant (or self) by local tag name."""
    found = find_all(node, name)
    return found[0] if found else None
