"""
Shape module.

Only rectangles are supported.
"""

import logging
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Optional, Tuple

from attrs import define, field

from footlights.api.foundation import (
    AbsoluteSize,
    Center,
    Color,
    Position,
    PositionOption,
    Size,
    SizeOption,
)
from footlights.api.layers import TangibleLayer, frame

logger = logging.getLogger(__name__)


class BasicShapeKind(str, Enum):
    """Kind of a basic shape."""

    RECTANGLE = "rectangle"


@define
class BasicShape(TangibleLayer):
    """
    Basic shape layer, a fixed 100x100 centered rectangle by default.

    .. py:attribute:: shape_type
    .. py:attribute:: size
    .. py:attribute:: position
    .. py:attribute:: fill

        Fill color, or `None` to leave it to the renderer default.
    """

    kind = "shape"

    shape_type: BasicShapeKind = field(
        default=BasicShapeKind.RECTANGLE, converter=BasicShapeKind
    )
    size: SizeOption = field(factory=lambda: AbsoluteSize(100, 100))
    position: PositionOption = field(factory=Center)
    fill: Optional[Color] = None

    def size_policy(self) -> SizeOption:
        return self.size

    def position_policy(self) -> PositionOption:
        return self.position

    def render(
        self, size: Size, position: Position, unique_id: str
    ) -> Tuple[ET.Element, Optional[ET.Element]]:
        rect = frame(size, position, tag="rect")
        if self.fill is not None:
            rect.set("fill", self.fill)
        return rect, None
