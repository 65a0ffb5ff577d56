"""
Validation functions for attrs.
"""

import math
from typing import Any

from attrs import define

__all__ = ["range_", "non_negative", "non_negative_number"]


@define(repr=False, frozen=True)
class _RangeValidator:
    minimum: Any
    maximum: Any

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        try:
            in_range = self.minimum <= value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise ValueError(
                "'{name}' must be in range [{minimum!r}, {maximum!r}]: {value!r}".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self) -> str:
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def range_(minimum: Any, maximum: Any) -> _RangeValidator:
    """
    A validator that raises a :exc:`ValueError` if the initializer is called
    with a value that does not belong in the [minimum, maximum] range. The
    check is performed using ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum)


def non_negative(inst: Any, attr: Any, value: Any) -> None:
    """
    A validator for pixel quantities: a non-negative ``int``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            "'{name}' must be an integer: {value!r}".format(name=attr.name, value=value)
        )
    if value < 0:
        raise ValueError(
            "'{name}' must be non-negative: {value!r}".format(name=attr.name, value=value)
        )


def non_negative_number(inst: Any, attr: Any, value: Any) -> None:
    """
    A validator for finite, non-negative ``int`` or ``float`` values, such as
    blur radii.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(
            "'{name}' must be a number: {value!r}".format(name=attr.name, value=value)
        )
    if not math.isfinite(value) or value < 0:
        raise ValueError(
            "'{name}' must be finite and non-negative: {value!r}".format(
                name=attr.name, value=value
            )
        )
