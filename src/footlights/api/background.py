"""
Background module.

A background layer only carries a fill. By default it wraps everything
stacked on top of it with a generous margin and centers itself, so it grows
with its content.

Example::

    from footlights.api.background import Background

    background = Background.new_linear_gradient(
        [("#000000", "0%"), ("#ffffff", "100%")], 45.0
    )
"""

import logging
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional, Tuple, Union

from attrs import define, field
from attrs.validators import optional

from footlights.api.foundation import (
    Center,
    Color,
    FitContent,
    Position,
    PositionOption,
    Size,
    SizeOption,
)
from footlights.api.layers import TangibleLayer, frame
from footlights.errors import UnimplementedVariantError
from footlights.markup import element, format_value
from footlights.validators import non_negative_number

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 100


def _to_stops(value: Iterable) -> List[Tuple[Color, str]]:
    return [(str(color), str(offset)) for color, offset in value]


@define
class LinearGradient:
    """
    Linear gradient.

    .. py:attribute:: stops

        Ordered list of ``(color, offset)`` pairs, e.g. ``("red", "0%")``.

    .. py:attribute:: degree

        Rotation of the gradient vector in degrees.
    """

    stops: List[Tuple[Color, str]] = field(factory=list, converter=_to_stops)
    degree: float = field(default=0.0, converter=float)


@define
class RadialGradient:
    """Radial gradient. Declared but cannot be rendered yet."""


Fill = Union[Color, LinearGradient, RadialGradient]


@define
class Background(TangibleLayer):
    """
    Background layer.

    .. py:attribute:: fill

        A color string, :py:class:`LinearGradient` or :py:class:`RadialGradient`.

    .. py:attribute:: blur

        Optional Gaussian blur standard deviation for gradient fills.
    """

    kind = "background"

    fill: Fill = "white"
    blur: Optional[float] = field(
        default=None, validator=optional(non_negative_number)
    )
    size: SizeOption = field(factory=lambda: FitContent(DEFAULT_PADDING))
    position: PositionOption = field(factory=Center)

    @classmethod
    def new_pure(cls, color: Color, **kwargs) -> "Background":
        return cls(fill=color, **kwargs)

    @classmethod
    def new_linear_gradient(
        cls, stops: Iterable[Tuple[Color, str]], degree: float, **kwargs
    ) -> "Background":
        return cls(fill=LinearGradient(stops, degree), **kwargs)

    @classmethod
    def new_radial_gradient(cls, **kwargs) -> "Background":
        return cls(fill=RadialGradient(), **kwargs)

    def size_policy(self) -> SizeOption:
        return self.size

    def position_policy(self) -> PositionOption:
        return self.position

    def render(
        self, size: Size, position: Position, unique_id: str
    ) -> Tuple[ET.Element, Optional[ET.Element]]:
        if isinstance(self.fill, LinearGradient):
            return self._render_linear(self.fill, size, position, unique_id), None
        if isinstance(self.fill, RadialGradient):
            raise UnimplementedVariantError(
                "Radial gradient backgrounds cannot be rendered"
            )
        rect = frame(size, position, tag="rect")
        rect.set("fill", self.fill)
        return rect, None

    def _render_linear(
        self, gradient: LinearGradient, size: Size, position: Position, unique_id: str
    ) -> ET.Element:
        gradient_id = "gradient-%s" % unique_id
        blur_id = "blur-%s" % unique_id

        svg = frame(size, position)
        defs = element("defs")
        defs.append(
            element(
                "linearGradient",
                [
                    element("stop", offset=offset, stop_color=color)
                    for color, offset in gradient.stops
                ],
                id=gradient_id,
                gradientTransform="rotate(%s)" % format_value(gradient.degree),
            )
        )
        svg.append(defs)

        if self.blur is not None:
            defs.append(_blur_filter(blur_id, self.blur))
            svg.append(
                element(
                    "rect",
                    width="100%",
                    height="100%",
                    fill="url(#%s)" % gradient_id,
                    filter="url(#%s)" % blur_id,
                )
            )
        svg.append(
            element("rect", width="100%", height="100%", fill="url(#%s)" % gradient_id)
        )
        return svg


def _blur_filter(filter_id: str, blur: float) -> ET.Element:
    # The discrete alpha transfer keeps the blurred edges opaque.
    return element(
        "filter",
        [
            element("feGaussianBlur", stdDeviation=blur),
            element(
                "feComponentTransfer",
                [element("feFuncA", type="discrete", tableValues="1 1")],
            ),
        ],
        id=filter_id,
        x=0,
        y=0,
        width="100%",
        height="100%",
    )
