"""
Structure module.

The structure of a document is an ordered list of layer slots, bottom
first. Each slot names the kind of layer to build and the style to build it
from. Together with a :py:class:`~footlights.config.style.StyleCollection`
it forms a :py:class:`Document`, which is what a template file holds::

    structure:
      - {kind: background, id: bg, style: bg}
      - {kind: image, id: image, style: image}
    styles:
      bg:
        color: {linear: {stops: [["#000000", 0%], ["#ffffff", 100%]], degree: 45}}
      image:
        image: ${image}
        round: 20

``${name}`` placeholders are substituted before the file is parsed.
"""

import io
import logging
import os
from enum import Enum
from string import Template
from typing import Any, Dict, Iterator, List, Optional, TextIO, Union

import yaml
from attrs import define, field

from footlights.config.style import StyleCollection
from footlights.errors import ConfigurationError

logger = logging.getLogger(__name__)


class LayerKind(str, Enum):
    """Kind of layer a slot builds."""

    BACKGROUND = "background"
    IMAGE = "image"
    SHAPE = "shape"


@define
class LayerSlot:
    """
    One slot in the structure.

    .. py:attribute:: kind

        :py:class:`LayerKind` of the layer.

    .. py:attribute:: id

        Identifier of the slot.

    .. py:attribute:: style

        Name of the style in the paired style collection.
    """

    kind: LayerKind = field(converter=LayerKind)
    id: str
    style: str

    def to_data(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "id": self.id, "style": self.style}

    @classmethod
    def from_data(cls, data: Any) -> "LayerSlot":
        if not isinstance(data, dict):
            raise ConfigurationError("Layer slot must be a mapping: %r" % (data,))
        missing = [key for key in ("kind", "id", "style") if key not in data]
        if missing:
            raise ConfigurationError(
                "Layer slot %r is missing: %s" % (data, ", ".join(missing))
            )
        unknown = set(data) - {"kind", "id", "style"}
        if unknown:
            raise ConfigurationError(
                "Layer slot %r has unknown keys: %s" % (data, ", ".join(sorted(unknown)))
            )
        try:
            kind = LayerKind(data["kind"])
        except ValueError as e:
            raise ConfigurationError(
                "Unknown layer kind %r in slot %r" % (data["kind"], data["id"])
            ) from e
        return cls(kind, str(data["id"]), str(data["style"]))


@define
class Structure:
    """Ordered layer slots, bottom first."""

    layers: List[LayerSlot] = field(factory=list)

    @classmethod
    def default(cls) -> "Structure":
        """A background slot ``bg`` under an image slot ``image``."""
        return cls(
            [
                LayerSlot(LayerKind.BACKGROUND, "bg", "bg"),
                LayerSlot(LayerKind.IMAGE, "image", "image"),
            ]
        )

    def to_data(self) -> List[Dict[str, Any]]:
        return [slot.to_data() for slot in self.layers]

    @classmethod
    def from_data(cls, data: Any) -> "Structure":
        if data is None:
            return cls.default()
        if not isinstance(data, list):
            raise ConfigurationError("Structure must be a list: %r" % (data,))
        return cls([LayerSlot.from_data(item) for item in data])

    def __iter__(self) -> Iterator[LayerSlot]:
        return iter(self.layers)

    def __len__(self) -> int:
        return len(self.layers)


@define
class Document:
    """A structure and the styles it references."""

    structure: Structure = field(factory=Structure.default)
    styles: StyleCollection = field(factory=StyleCollection.default)

    def to_data(self) -> Dict[str, Any]:
        return {"structure": self.structure.to_data(), "styles": self.styles.to_data()}

    @classmethod
    def from_data(cls, data: Any) -> "Document":
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Document must be a mapping: %r" % (data,))
        unknown = set(data) - {"structure", "styles"}
        if unknown:
            raise ConfigurationError(
                "Document has unknown keys: %s" % ", ".join(sorted(unknown))
            )
        return cls(
            Structure.from_data(data.get("structure")),
            StyleCollection.from_data(data.get("styles")),
        )


def loads_document(text: str, **substitutions: str) -> Document:
    """
    Parse a document from YAML text.

    :param text: YAML text, optionally with ``${name}`` placeholders.
    :param substitutions: values for the placeholders. Placeholders without
        a value are left untouched.
    :raise ConfigurationError: if the text is not a valid document.
    """
    if substitutions:
        text = Template(text).safe_substitute(substitutions)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError("Invalid YAML document: %s" % e) from e
    return Document.from_data(data)


def load_document(
    fp: Union[str, os.PathLike, TextIO], **substitutions: str
) -> Document:
    """
    Load a document from a YAML file.

    :param fp: filename or text file-like object.
    :param substitutions: values for ``${name}`` placeholders.
    """
    if isinstance(fp, (str, os.PathLike)):
        logger.debug("Loading document from %s", fp)
        with open(fp, "r", encoding="utf-8") as f:
            return loads_document(f.read(), **substitutions)
    return loads_document(fp.read(), **substitutions)


def dump_document(document: Document, fp: Optional[TextIO] = None) -> str:
    """
    Dump a document to YAML.

    :param document: :py:class:`Document` to dump.
    :param fp: optional text file-like object to write to.
    :return: the YAML text.
    """
    with io.StringIO() as f:
        yaml.safe_dump(document.to_data(), f, sort_keys=False, allow_unicode=True)
        text = f.getvalue()
    if fp is not None:
        fp.write(text)
    return text
