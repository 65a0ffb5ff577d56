import pytest

from footlights.config.resolver import _BUILDERS
from footlights.config.structure import LayerKind
from footlights.registry import new_registry


def test_new_registry() -> None:
    registry, register = new_registry(attribute="kind")

    @register("box")
    def build_box():
        return "box"

    assert registry == {"box": build_box}
    assert build_box.kind == "box"

    with pytest.raises(KeyError):
        register("box")(lambda: None)


def test_resolver_builders_cover_layer_kinds() -> None:
    assert set(_BUILDERS) == set(LayerKind)
    for kind, builder in _BUILDERS.items():
        assert builder.kind is kind
