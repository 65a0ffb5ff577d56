"""
Layer module.

:py:class:`TangibleLayer` is the base of every layer variant. Subclasses
implement :py:meth:`~TangibleLayer.size_policy`,
:py:meth:`~TangibleLayer.position_policy` and
:py:meth:`~TangibleLayer.render`; the geometry helpers
:py:meth:`~TangibleLayer.resolve_size` and
:py:meth:`~TangibleLayer.resolve_position` are shared and must not be
overridden.

Layer variants:

- :py:class:`~footlights.api.background.Background`: solid or gradient fill
- :py:class:`~footlights.api.image.Image`: external raster reference
- :py:class:`~footlights.api.shape.BasicShape`: flat-filled rectangle
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Tuple

from footlights.api.foundation import (
    Position,
    PositionOption,
    Size,
    SizeOption,
    resolve_position,
    resolve_size,
)
from footlights.markup import element

logger = logging.getLogger(__name__)


class TangibleLayer:
    """Base class of the layer variants."""

    #: Kind of the layer, such as ``background``, ``image`` or ``shape``.
    kind: str = "layer"

    def size_policy(self) -> SizeOption:
        raise NotImplementedError()

    def position_policy(self) -> PositionOption:
        raise NotImplementedError()

    def render(
        self, size: Size, position: Position, unique_id: str
    ) -> Tuple[ET.Element, Optional[ET.Element]]:
        raise NotImplementedError()

    def resolve_size(self, child_size: Size) -> Size:
        """Resolve the size policy against the accumulated child size."""
        return resolve_size(self.size_policy(), child_size)

    def resolve_position(self, container: Size, size: Size) -> Position:
        """Resolve the position policy within the container footprint."""
        return resolve_position(self.position_policy(), container, size)


def frame(size: Size, position: Position, tag: str = "svg") -> ET.Element:
    """Element spanning the resolved geometry, a nested viewport by default."""
    return element(
        tag,
        width=size.width,
        height=size.height,
        x=position.x,
        y=position.y,
    )
