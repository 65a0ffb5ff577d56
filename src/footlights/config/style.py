"""
Style module.

A :py:class:`Style` is a flat record of optional attributes. Which of them
matter depends on the kind of layer the style is applied to; the others are
ignored. A :py:class:`StyleCollection` maps style names to styles.

Styles round-trip through plain data (dicts, lists, strings and numbers),
which is what YAML loads into::

    position: center               # or {absolute: [x, y]}
    size: {fit_content: 100}       # or {absolute: [width, height]}
    image: ./assets/input.png
    round: 20
    shadow: {x: 5, y: 5}           # blur defaults to 7, opacity to 0.6
    color: red                     # or {linear: {stops: [[red, 0%]], degree: 45}}
    blur: 4
"""

import logging
import math
from typing import Any, Dict, Iterator, Optional

from attrs import define, field
from attrs.validators import optional

from footlights.api.background import Fill, LinearGradient, RadialGradient
from footlights.api.effects import DEFAULT_SHADOW_BLUR, DEFAULT_SHADOW_OPACITY, DropShadow
from footlights.api.foundation import (
    AbsolutePosition,
    AbsoluteSize,
    Center,
    FitContent,
    PositionOption,
    SizeOption,
)
from footlights.errors import ConfigurationError
from footlights.validators import non_negative, non_negative_number

logger = logging.getLogger(__name__)

STYLE_KEYS = ("position", "size", "image", "round", "shadow", "color", "blur")


@define
class Style:
    """
    Style of a layer. Every attribute is optional.

    .. py:attribute:: position

        Position policy override.

    .. py:attribute:: size

        Size policy override.

    .. py:attribute:: image

        Image source: file path, URL or data URL.

    .. py:attribute:: round

        Corner radius of an image.

    .. py:attribute:: shadow

        :py:class:`~footlights.api.effects.DropShadow` of an image.

    .. py:attribute:: color

        Fill of a background or shape: a color string,
        :py:class:`~footlights.api.background.LinearGradient` or
        :py:class:`~footlights.api.background.RadialGradient`.

    .. py:attribute:: blur

        Gaussian blur of a gradient background.
    """

    position: Optional[PositionOption] = None
    size: Optional[SizeOption] = None
    image: Optional[str] = None
    round: Optional[int] = field(default=None, validator=optional(non_negative))
    shadow: Optional[DropShadow] = None
    color: Optional[Fill] = None
    blur: Optional[float] = field(
        default=None, validator=optional(non_negative_number)
    )

    def to_data(self) -> Dict[str, Any]:
        """Convert to plain data, omitting unset attributes."""
        data: Dict[str, Any] = {}
        if self.position is not None:
            data["position"] = position_to_data(self.position)
        if self.size is not None:
            data["size"] = size_to_data(self.size)
        if self.image is not None:
            data["image"] = self.image
        if self.round is not None:
            data["round"] = self.round
        if self.shadow is not None:
            data["shadow"] = shadow_to_data(self.shadow)
        if self.color is not None:
            data["color"] = fill_to_data(self.color)
        if self.blur is not None:
            data["blur"] = self.blur
        return data

    @classmethod
    def from_data(cls, data: Optional[Dict[str, Any]], name: str = "?") -> "Style":
        """
        Build a style from plain data.

        :param data: mapping as produced by :py:meth:`to_data`.
        :param name: style name used in error messages.
        :raise ConfigurationError: if the data is malformed.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError("Style %r must be a mapping: %r" % (name, data))
        unknown = set(data) - set(STYLE_KEYS)
        if unknown:
            raise ConfigurationError(
                "Style %r has unknown attributes: %s" % (name, ", ".join(sorted(unknown)))
            )
        try:
            return cls(
                position=_optional(position_from_data, data.get("position")),
                size=_optional(size_from_data, data.get("size")),
                image=_optional(str, data.get("image")),
                round=_optional(_to_int, data.get("round")),
                shadow=_optional(shadow_from_data, data.get("shadow")),
                color=_optional(fill_from_data, data.get("color")),
                blur=_optional(float, data.get("blur")),
            )
        except ConfigurationError as e:
            raise ConfigurationError("Style %r: %s" % (name, e)) from e
        except (TypeError, ValueError) as e:
            raise ConfigurationError("Style %r is invalid: %s" % (name, e)) from e


@define
class StyleCollection:
    """
    Named styles.

    The collection is dict-like: ``"bg" in styles``, ``styles["bg"]`` and
    iteration over names.
    """

    styles: Dict[str, Style] = field(factory=dict)

    @classmethod
    def default(cls) -> "StyleCollection":
        """
        Styles for the default structure: a black-to-white gradient ``bg``
        and a rounded, shadowed ``image`` whose source is the ``${image}``
        template placeholder.
        """
        return cls(
            {
                "bg": Style(
                    color=LinearGradient([("#000000", "0%"), ("#ffffff", "100%")], 45.0)
                ),
                "image": Style(image="${image}", round=20, shadow=DropShadow()),
            }
        )

    def add(self, name: str, style: Style) -> None:
        """Add or replace a style."""
        self.styles[name] = style

    def get(self, name: str) -> Optional[Style]:
        return self.styles.get(name)

    def to_data(self) -> Dict[str, Any]:
        return {name: style.to_data() for name, style in self.styles.items()}

    @classmethod
    def from_data(cls, data: Optional[Dict[str, Any]]) -> "StyleCollection":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError("Styles must be a mapping: %r" % (data,))
        return cls(
            {str(name): Style.from_data(value, str(name)) for name, value in data.items()}
        )

    def __contains__(self, name: object) -> bool:
        return name in self.styles

    def __getitem__(self, name: str) -> Style:
        return self.styles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.styles)

    def __len__(self) -> int:
        return len(self.styles)


def _optional(func: Any, value: Any) -> Any:
    return None if value is None else func(value)


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError("expected an integer, got %r" % (value,))
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigurationError("expected a finite integer, got %r" % (value,))
    if int(value) != value:
        raise ConfigurationError("expected an integer, got %r" % (value,))
    return int(value)


def _pair(value: Any, what: str) -> tuple:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigurationError("%s expects a pair, got %r" % (what, value))
    return (_to_int(value[0]), _to_int(value[1]))


def _single_key(data: Any, what: str) -> tuple:
    if not isinstance(data, dict) or len(data) != 1:
        raise ConfigurationError("Invalid %s: %r" % (what, data))
    return next(iter(data.items()))


def position_to_data(option: PositionOption) -> Any:
    if isinstance(option, Center):
        return "center"
    return {"absolute": [option.x, option.y]}


def position_from_data(data: Any) -> PositionOption:
    if data == "center":
        return Center()
    key, value = _single_key(data, "position")
    if key == "absolute":
        return AbsolutePosition(*_pair(value, "absolute position"))
    raise ConfigurationError("Unknown position option: %r" % (key,))


def size_to_data(option: SizeOption) -> Any:
    if isinstance(option, FitContent):
        return {"fit_content": option.padding}
    return {"absolute": [option.width, option.height]}


def size_from_data(data: Any) -> SizeOption:
    key, value = _single_key(data, "size")
    if key == "fit_content":
        return FitContent(_to_int(value))
    if key == "absolute":
        return AbsoluteSize(*_pair(value, "absolute size"))
    raise ConfigurationError("Unknown size option: %r" % (key,))


def shadow_to_data(shadow: DropShadow) -> Dict[str, Any]:
    return {
        "x": shadow.x,
        "y": shadow.y,
        "blur": shadow.blur,
        "opacity": shadow.opacity,
    }


def shadow_from_data(data: Any) -> DropShadow:
    if not isinstance(data, dict):
        raise ConfigurationError("Invalid shadow: %r" % (data,))
    unknown = set(data) - {"x", "y", "blur", "opacity"}
    if unknown:
        raise ConfigurationError(
            "Unknown shadow attributes: %s" % ", ".join(sorted(unknown))
        )
    if "x" not in data or "y" not in data:
        raise ConfigurationError("Shadow requires both 'x' and 'y': %r" % (data,))
    return DropShadow(
        x=_to_int(data["x"]),
        y=_to_int(data["y"]),
        blur=_to_int(data.get("blur", DEFAULT_SHADOW_BLUR)),
        opacity=data.get("opacity", DEFAULT_SHADOW_OPACITY),
    )


def fill_to_data(fill: Fill) -> Any:
    if isinstance(fill, LinearGradient):
        return {
            "linear": {
                "stops": [[color, offset] for color, offset in fill.stops],
                "degree": fill.degree,
            }
        }
    if isinstance(fill, RadialGradient):
        return {"radial": {}}
    return fill


def fill_from_data(data: Any) -> Fill:
    if isinstance(data, str):
        return data
    key, value = _single_key(data, "color")
    if key == "linear":
        if not isinstance(value, dict) or "stops" not in value:
            raise ConfigurationError("Linear gradient requires 'stops': %r" % (value,))
        stops = [_stop(stop) for stop in value["stops"]]
        return LinearGradient(stops, value.get("degree", 0.0))
    if key == "radial":
        return RadialGradient()
    raise ConfigurationError("Unknown color type: %r" % (key,))


def _stop(value: Any) -> tuple:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigurationError("Gradient stop expects [color, offset], got %r" % (value,))
    return (str(value[0]), str(value[1]))
