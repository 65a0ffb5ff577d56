"""
Foundation and policy types.

Geometry is expressed in whole pixels in a coordinate space without negative
values. A layer never computes its own geometry: it reports a *policy*
(:py:data:`SizeOption`, :py:data:`PositionOption`) and the
:py:class:`~footlights.api.canvas.Canvas` resolves it with
:py:func:`resolve_size` and :py:func:`resolve_position`.

Example::

    from footlights.api.foundation import FitContent, Size, resolve_size

    resolve_size(FitContent(10), Size(100, 50))  # Size(width=120, height=70)
"""

import logging
from typing import Tuple, Union

from attrs import define, field

from footlights.validators import non_negative

logger = logging.getLogger(__name__)

#: A fill-syntax color string: named color, hex, ``rgb()``, ``hsl()`` or a
#: ``url(#id)`` reference. It is not validated.
Color = str


@define(frozen=True)
class Size:
    """Width and height in pixels."""

    width: int = field(default=0, validator=non_negative)
    height: int = field(default=0, validator=non_negative)

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> "Size":
        return cls(*value)

    def astuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


@define(frozen=True)
class Position:
    """Offset of the top-left corner in pixels."""

    x: int = field(default=0, validator=non_negative)
    y: int = field(default=0, validator=non_negative)

    def astuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@define(frozen=True)
class FitContent:
    """Size to the layers stacked on top plus ``padding`` on every side."""

    padding: int = field(default=0, validator=non_negative)


@define(frozen=True)
class AbsoluteSize:
    """Fixed size regardless of the content."""

    width: int = field(validator=non_negative)
    height: int = field(validator=non_negative)


@define(frozen=True)
class Center:
    """Center within the footprint of the layer directly beneath."""


@define(frozen=True)
class AbsolutePosition:
    """Fixed offset regardless of the layer beneath."""

    x: int = field(validator=non_negative)
    y: int = field(validator=non_negative)


SizeOption = Union[FitContent, AbsoluteSize]
PositionOption = Union[Center, AbsolutePosition]


def resolve_size(option: SizeOption, child_size: Size) -> Size:
    """
    Resolve a size policy against the accumulated size of the layers above.

    :param option: size policy of the layer.
    :param child_size: accumulated size of everything stacked on top.
    :return: :py:class:`Size`
    """
    if isinstance(option, FitContent):
        return Size(
            child_size.width + 2 * option.padding,
            child_size.height + 2 * option.padding,
        )
    if isinstance(option, AbsoluteSize):
        return Size(option.width, option.height)
    raise TypeError("Unknown size option: %r" % (option,))


def _center(container: int, own: int) -> int:
    # Truncate after float division; a layer larger than its container
    # sticks to the origin.
    return max(0, int((container - own) / 2.0))


def resolve_position(option: PositionOption, container: Size, size: Size) -> Position:
    """
    Resolve a position policy within the footprint of the layer beneath.

    :param option: position policy of the layer.
    :param container: resolved size of the layer directly beneath.
    :param size: resolved size of the layer itself.
    :return: :py:class:`Position`
    """
    if isinstance(option, Center):
        return Position(
            _center(container.width, size.width),
            _center(container.height, size.height),
        )
    if isinstance(option, AbsolutePosition):
        return Position(option.x, option.y)
    raise TypeError("Unknown position option: %r" % (option,))
