import io
import logging
import xml.etree.ElementTree as ET

from PIL import Image

from footlights.markup import canonical, fromstring, tostring

logging.basicConfig(level=logging.DEBUG)


def compare_svg(node: ET.Element, expected: str) -> None:
    """Compare an element tree with markup, ignoring whitespace,
    attribute order and namespaces."""
    left = canonical(node)
    right = canonical(fromstring(expected))
    assert left == right, "%s vs %s" % (tostring(node), expected.strip())


def png_bytes(width: int, height: int) -> bytes:
    with io.BytesIO() as f:
        Image.new("RGBA", (width, height)).save(f, format="PNG")
        return f.getvalue()
