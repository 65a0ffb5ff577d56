"""
Protocol definitions for type hints to avoid circular imports.

:py:class:`TangibleLayerProtocol` is the contract every layer variant
satisfies; :py:class:`ImageSizeProvider` is the collaborator the structure
resolver consults for intrinsic image dimensions.
"""

import xml.etree.ElementTree as ET
from typing import Optional, Protocol, Tuple, runtime_checkable

from footlights.api.foundation import Position, PositionOption, Size, SizeOption


@runtime_checkable
class TangibleLayerProtocol(Protocol):
    """
    Protocol defining the layer interface for type checking.

    A tangible layer reports its size and position policies and renders
    itself at a geometry resolved by somebody else.
    """

    def size_policy(self) -> SizeOption:
        """Size policy of this layer. Pure."""
        ...

    def position_policy(self) -> PositionOption:
        """Position policy of this layer. Pure."""
        ...

    def render(
        self, size: Size, position: Position, unique_id: str
    ) -> Tuple[ET.Element, Optional[ET.Element]]:
        """
        Render to markup at the resolved geometry.

        :param size: resolved size.
        :param position: resolved position.
        :param unique_id: document-unique discriminator woven into every
            definition id the layer creates.
        :return: the primary element, and optionally definitions to hoist
            into the shared ``defs`` block.
        """
        ...


@runtime_checkable
class ImageSizeProvider(Protocol):
    """
    Collaborator resolving the intrinsic size of an image source.

    A source is a local path, an ``http(s)`` URL, or a base64 data URL.
    Implementations raise :py:class:`~footlights.errors.ImageSizeError` when
    the source cannot be resolved.
    """

    def get_image_size(self, source: str) -> Tuple[int, int]:
        """Return ``(width, height)`` in pixels."""
        ...
