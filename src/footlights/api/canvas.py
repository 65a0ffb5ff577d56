"""
Canvas module.

A :py:class:`Canvas` is an ordered stack of layers. The first layer is
painted first (visually at the bottom), the last layer is painted last.

Layout runs in two passes every time the canvas is rendered:

1. Sizes are resolved from the top layer down to the bottom layer. Each
   layer resolves its size policy against the accumulated size of the
   layers above it, so a background with a fit-content policy wraps
   whatever is stacked on top of it. The size of the bottom layer is the
   size of the document.
2. Positions are resolved from the bottom layer up to the top layer. Each
   layer is placed within the footprint of the layer directly beneath it.
   The bottom layer sits at the origin unless it asks for an absolute
   position.

Example::

    from footlights.api.background import Background
    from footlights.api.canvas import Canvas
    from footlights.api.image import Image

    canvas = Canvas()
    canvas.add_layer_on_top(Background.new_pure("red"))
    canvas.add_layer_on_top(Image.new_from_path("input.png", (640, 480)))
    svg = canvas.to_svg_string()
"""

import logging
import xml.etree.ElementTree as ET
from typing import Iterator, List, Union

from attrs import define

from footlights.api.background import Background
from footlights.api.foundation import AbsolutePosition, Position, Size
from footlights.api.image import Image
from footlights.api.shape import BasicShape
from footlights.markup import SVG_NS, element, tostring

logger = logging.getLogger(__name__)

Layer = Union[Background, Image, BasicShape]


@define(frozen=True)
class Placement:
    """Resolved geometry of one layer."""

    layer: Layer
    size: Size
    position: Position


class Canvas:
    """
    Ordered stack of layers.

    The canvas is list-like: ``len(canvas)``, ``canvas[0]`` and iteration
    follow paint order, bottom first.
    """

    def __init__(self) -> None:
        self._layers: List[Layer] = []

    def add_layer_on_top(self, layer: Layer) -> None:
        """Push a layer above every existing layer."""
        self._layers.append(layer)

    @property
    def layers(self) -> List[Layer]:
        return list(self._layers)

    def layout(self) -> List[Placement]:
        """
        Resolve the geometry of every layer.

        :return: list of :py:class:`Placement` in paint order.
        """
        sizes: List[Size] = []
        accumulated = Size(0, 0)
        for layer in reversed(self._layers):
            accumulated = layer.resolve_size(accumulated)
            sizes.append(accumulated)
        sizes.reverse()

        placements = []
        container = Size(0, 0)
        for index, (layer, size) in enumerate(zip(self._layers, sizes)):
            if index == 0 and not isinstance(layer.position_policy(), AbsolutePosition):
                position = Position(0, 0)
            else:
                position = layer.resolve_position(container, size)
            logger.debug(
                "Layer %d (%s): size=%dx%d position=(%d, %d)",
                index,
                layer.kind,
                size.width,
                size.height,
                position.x,
                position.y,
            )
            placements.append(Placement(layer, size, position))
            container = size
        return placements

    @property
    def size(self) -> Size:
        """Size of the document, i.e. the resolved size of the bottom layer."""
        accumulated = Size(0, 0)
        for layer in reversed(self._layers):
            accumulated = layer.resolve_size(accumulated)
        return accumulated

    def render(self) -> ET.Element:
        """
        Render the canvas to an ``svg`` element tree.

        Definitions returned by layers are collected into one ``defs`` block
        appended after the layers, when there is any.

        :raise UnimplementedVariantError: if a layer cannot be rendered.
        """
        placements = self.layout()
        size = placements[0].size if placements else Size(0, 0)
        root = element("{%s}svg" % SVG_NS, width=size.width, height=size.height)
        defs = element("defs")
        for index, placement in enumerate(placements):
            node, extra = placement.layer.render(
                placement.size, placement.position, str(index)
            )
            root.append(node)
            if extra is not None:
                defs.append(extra)
        if len(defs):
            root.append(defs)
        logger.debug("Rendered %d layers at %dx%d", len(placements), *size.astuple())
        return root

    def to_svg_string(self) -> str:
        """Render the canvas and serialize it to SVG markup."""
        return tostring(self.render())

    def __len__(self) -> int:
        return self._layers.__len__()

    def __iter__(self) -> Iterator[Layer]:
        return self._layers.__iter__()

    def __getitem__(self, key: int) -> Layer:
        return self._layers.__getitem__(key)

    def __repr__(self) -> str:
        return "%s(%s)" % (
            self.__class__.__name__,
            " ".join(layer.kind for layer in self._layers),
        )
