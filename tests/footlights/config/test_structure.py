import io

import pytest

from footlights.config.structure import (
    Document,
    LayerKind,
    LayerSlot,
    Structure,
    dump_document,
    load_document,
    loads_document,
)
from footlights.config.style import Style, StyleCollection
from footlights.errors import ConfigurationError

TEMPLATE = """
structure:
  - {kind: background, id: bg, style: bg}
  - {kind: image, id: photo, style: photo}
styles:
  bg:
    color: "#123456"
    size: {fit_content: 20}
  photo:
    image: ${image}
    round: 8
"""


def test_structure_default() -> None:
    structure = Structure.default()
    assert len(structure) == 2
    assert [slot.kind for slot in structure] == [LayerKind.BACKGROUND, LayerKind.IMAGE]
    assert structure.to_data() == [
        {"kind": "background", "id": "bg", "style": "bg"},
        {"kind": "image", "id": "image", "style": "image"},
    ]
    assert Structure.from_data(structure.to_data()) == structure
    assert Structure.from_data(None) == structure


def test_layer_slot() -> None:
    slot = LayerSlot("shape", "box", "box")
    assert slot.kind is LayerKind.SHAPE
    assert LayerSlot.from_data(slot.to_data()) == slot


@pytest.mark.parametrize(
    "data",
    [
        "bg",
        {"kind": "image", "id": "x"},
        {"kind": "video", "id": "x", "style": "x"},
        {"kind": "image", "id": "x", "style": "x", "z": 1},
    ],
)
def test_layer_slot_invalid(data) -> None:
    with pytest.raises(ConfigurationError):
        LayerSlot.from_data(data)


def test_structure_invalid() -> None:
    with pytest.raises(ConfigurationError):
        Structure.from_data({"kind": "image"})


def test_document_default_round_trip() -> None:
    document = Document()
    assert document.structure == Structure.default()
    assert document.styles == StyleCollection.default()
    text = dump_document(document)
    assert loads_document(text) == document


def test_document_dump_to_file() -> None:
    with io.StringIO() as f:
        text = dump_document(Document(), f)
        assert f.getvalue() == text
    assert text.startswith("structure:")


def test_loads_document_substitution() -> None:
    document = loads_document(TEMPLATE, image="./photo.png")
    assert [slot.id for slot in document.structure] == ["bg", "photo"]
    assert document.styles["photo"] == Style(image="./photo.png", round=8)
    assert document.styles["bg"].color == "#123456"


def test_loads_document_keeps_unknown_placeholders() -> None:
    document = loads_document(TEMPLATE)
    assert document.styles["photo"].image == "${image}"


def test_load_document(tmp_path) -> None:
    path = tmp_path / "template.yml"
    path.write_text(TEMPLATE, encoding="utf-8")
    assert load_document(path, image="a.png") == load_document(str(path), image="a.png")
    with open(path, encoding="utf-8") as f:
        assert load_document(f, image="a.png").styles["photo"].image == "a.png"


def test_load_document_missing_structure() -> None:
    document = loads_document("styles: {bg: {color: red}}")
    assert document.structure == Structure.default()
    assert document.styles["bg"] == Style(color="red")


@pytest.mark.parametrize(
    "text",
    [
        "structure: [",
        "- a\n- b\n",
        "layers: []",
    ],
)
def test_loads_document_invalid(text) -> None:
    with pytest.raises(ConfigurationError):
        loads_document(text)
