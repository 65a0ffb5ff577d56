"""
Image module.

An image layer references an external raster by path, URL or data URL. Its
intrinsic size is supplied by the caller, usually through an
:py:class:`~footlights.api.protocols.ImageSizeProvider`; the layer never
decodes the image itself.

When a drop shadow is requested, the layer reserves clearance around the
image so that the blurred shadow is not clipped. The same clearance is
applied to both sides of an axis to keep the image centered in its own box.

Example::

    from footlights.api.effects import DropShadow
    from footlights.api.image import Image

    image = Image.new_from_path("./assets/input.png", (100, 100))
    image.round = 15
    image.shadow = DropShadow(5, 5, 3)
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Tuple, Union

from attrs import define, field
from attrs.validators import optional

from footlights.api.effects import DropShadow
from footlights.api.foundation import (
    AbsoluteSize,
    Center,
    Position,
    PositionOption,
    Size,
    SizeOption,
)
from footlights.api.layers import TangibleLayer, frame
from footlights.markup import element
from footlights.validators import non_negative

logger = logging.getLogger(__name__)


def _to_size(value: Union[Size, Tuple[int, int]]) -> Size:
    if isinstance(value, Size):
        return value
    return Size.from_tuple(tuple(value))


@define
class Image(TangibleLayer):
    """
    Image layer.

    .. py:attribute:: path

        Source reference: file path, URL or data URL.

    .. py:attribute:: size

        Intrinsic size of the image.

    .. py:attribute:: round

        Corner radius in pixels, or `None` for square corners.

    .. py:attribute:: shadow

        :py:class:`~footlights.api.effects.DropShadow`, or `None`.
    """

    kind = "image"

    path: str
    size: Size = field(converter=_to_size)
    round: Optional[int] = field(default=None, validator=optional(non_negative))
    shadow: Optional[DropShadow] = None
    position: PositionOption = field(factory=Center)

    @classmethod
    def new_from_path(
        cls, path: str, size: Union[Size, Tuple[int, int]], **kwargs
    ) -> "Image":
        return cls(path, size, **kwargs)

    def padding(self) -> Tuple[int, int]:
        """
        Extra space left around the image for the shadow, per side.

        :return: ``(horizontal, vertical)`` padding in pixels.
        """
        if self.shadow is None:
            return (0, 0)
        return self.shadow.clearance()

    def size_policy(self) -> SizeOption:
        pad_x, pad_y = self.padding()
        return AbsoluteSize(
            self.size.width + 2 * pad_x,
            self.size.height + 2 * pad_y,
        )

    def position_policy(self) -> PositionOption:
        return self.position

    def render(
        self, size: Size, position: Position, unique_id: str
    ) -> Tuple[ET.Element, Optional[ET.Element]]:
        clip_id = "clip-%s" % unique_id
        shadow_id = "shadow-%s" % unique_id

        pad_x, pad_y = self.padding()
        content = dict(
            width=max(0, size.width - 2 * pad_x),
            height=max(0, size.height - 2 * pad_y),
            x=pad_x,
            y=pad_y,
        )

        svg = frame(size, position)
        if self.round is not None or self.shadow is not None:
            defs = element("defs")
            if self.round is not None:
                defs.append(
                    element(
                        "clipPath",
                        [element("rect", rx=self.round, **content)],
                        id=clip_id,
                    )
                )
            if self.shadow is not None:
                defs.append(
                    element(
                        "filter",
                        [
                            element(
                                "feDropShadow",
                                dx=self.shadow.x,
                                dy=self.shadow.y,
                                stdDeviation=self.shadow.blur,
                                flood_opacity=self.shadow.opacity,
                            )
                        ],
                        id=shadow_id,
                    )
                )
            svg.append(defs)

        if self.shadow is not None:
            # Painted first so that the shadow lies under the image.
            svg.append(
                element(
                    "rect",
                    rx=self.round or 0,
                    filter="url(#%s)" % shadow_id,
                    **content,
                )
            )
        svg.append(
            element(
                "image",
                href=self.path,
                clip_path=None if self.round is None else "url(#%s)" % clip_id,
                **content,
            )
        )
        return svg, None
