"""
Effects module.

Only the drop shadow is supported. See `feDropShadow`_ for the semantics of
the fields.

.. _feDropShadow: https://www.w3.org/TR/filter-effects/#feDropShadowElement
"""

import logging
from typing import Tuple

from attrs import define, field

from footlights.validators import non_negative, range_

logger = logging.getLogger(__name__)

DEFAULT_SHADOW_BLUR = 7
DEFAULT_SHADOW_OPACITY = 0.6


@define
class DropShadow:
    """
    Drop shadow effect.

    .. py:attribute:: x

        Horizontal offset in pixels.

    .. py:attribute:: y

        Vertical offset in pixels.

    .. py:attribute:: blur

        Standard deviation of the Gaussian blur in pixels.

    .. py:attribute:: opacity

        Flood opacity in [0, 1].
    """

    x: int = field(default=5, validator=non_negative)
    y: int = field(default=5, validator=non_negative)
    blur: int = field(default=DEFAULT_SHADOW_BLUR, validator=non_negative)
    opacity: float = field(
        default=DEFAULT_SHADOW_OPACITY, converter=float, validator=range_(0.0, 1.0)
    )

    def clearance(self) -> Tuple[int, int]:
        """
        Utmost extent of the shadow beyond one side of the image.

        A Gaussian blur with standard deviation ``blur`` affects pixels up to
        ``3 * blur + 1`` away; the offset adds to that.

        :return: ``(horizontal, vertical)`` clearance in pixels.
        """
        return (self.x + 3 * self.blur + 1, self.y + 3 * self.blur + 1)
