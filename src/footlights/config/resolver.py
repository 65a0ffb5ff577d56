"""
Structure resolver.

Turns a :py:class:`~footlights.config.structure.Structure` and a
:py:class:`~footlights.config.style.StyleCollection` into a
:py:class:`~footlights.api.canvas.Canvas`. Every slot is looked up and built
before the canvas is assembled, so a configuration error never leaves a
partially built canvas behind.
"""

import logging
from typing import Callable, Dict, List

from footlights.api.background import Background, LinearGradient, RadialGradient
from footlights.api.canvas import Canvas, Layer
from footlights.api.image import Image
from footlights.api.protocols import ImageSizeProvider
from footlights.api.shape import BasicShape
from footlights.config.structure import LayerKind, LayerSlot, Structure
from footlights.config.style import Style, StyleCollection
from footlights.errors import ConfigurationError, MissingAttributeError, StyleNotFoundError
from footlights.registry import new_registry

logger = logging.getLogger(__name__)

_BUILDERS, register = new_registry(attribute="kind")

Builder = Callable[[LayerSlot, Style, ImageSizeProvider], Layer]


def build_canvas(
    structure: Structure, styles: StyleCollection, image_size_provider: ImageSizeProvider
) -> Canvas:
    """
    Build a canvas from a structure and its styles.

    :param structure: ordered layer slots, bottom first.
    :param styles: styles referenced by the slots.
    :param image_size_provider: resolves the intrinsic size of images.
    :raise StyleNotFoundError: if a slot references an unknown style.
    :raise MissingAttributeError: if a style lacks an attribute its layer
        kind requires.
    :return: :py:class:`~footlights.api.canvas.Canvas`
    """
    layers: List[Layer] = []
    for slot in structure:
        style = styles.get(slot.style)
        if style is None:
            raise StyleNotFoundError(slot.style, slot.id)
        builder: Builder = _BUILDERS[slot.kind]
        layer = builder(slot, style, image_size_provider)
        logger.debug("Built %s layer %r from style %r", slot.kind.value, slot.id, slot.style)
        layers.append(layer)

    canvas = Canvas()
    for layer in layers:
        canvas.add_layer_on_top(layer)
    return canvas


def _policies(style: Style) -> Dict[str, object]:
    kwargs: Dict[str, object] = {}
    if style.size is not None:
        kwargs["size"] = style.size
    if style.position is not None:
        kwargs["position"] = style.position
    return kwargs


@register(LayerKind.BACKGROUND)
def _build_background(
    slot: LayerSlot, style: Style, image_size_provider: ImageSizeProvider
) -> Background:
    if style.color is None:
        raise MissingAttributeError(slot.style, slot.kind.value, "color")
    return Background(fill=style.color, blur=style.blur, **_policies(style))


@register(LayerKind.IMAGE)
def _build_image(
    slot: LayerSlot, style: Style, image_size_provider: ImageSizeProvider
) -> Image:
    if style.image is None:
        raise MissingAttributeError(slot.style, slot.kind.value, "image")
    size = image_size_provider.get_image_size(style.image)
    image = Image.new_from_path(style.image, size, round=style.round, shadow=style.shadow)
    if style.position is not None:
        image.position = style.position
    return image


@register(LayerKind.SHAPE)
def _build_shape(
    slot: LayerSlot, style: Style, image_size_provider: ImageSizeProvider
) -> BasicShape:
    if isinstance(style.color, (LinearGradient, RadialGradient)):
        raise ConfigurationError(
            "Style %r: a shape layer only accepts a plain color" % slot.style
        )
    return BasicShape(fill=style.color, **_policies(style))
