import pytest

from footlights.api.foundation import (
    AbsolutePosition,
    AbsoluteSize,
    Center,
    FitContent,
    Position,
    Size,
    resolve_position,
    resolve_size,
)


@pytest.mark.parametrize(
    "padding, child, expected",
    [
        (0, Size(0, 0), Size(0, 0)),
        (100, Size(0, 0), Size(200, 200)),
        (10, Size(100, 50), Size(120, 70)),
    ],
)
def test_resolve_size_fit_content(padding, child, expected) -> None:
    assert resolve_size(FitContent(padding), child) == expected


@pytest.mark.parametrize("child", [Size(0, 0), Size(10, 10), Size(1000, 20)])
def test_resolve_size_absolute(child) -> None:
    assert resolve_size(AbsoluteSize(30, 40), child) == Size(30, 40)


@pytest.mark.parametrize(
    "container, size, expected",
    [
        (Size(300, 300), Size(100, 100), Position(100, 100)),
        (Size(101, 103), Size(100, 100), Position(0, 1)),
        (Size(100, 100), Size(100, 100), Position(0, 0)),
        (Size(0, 0), Size(100, 100), Position(0, 0)),
        (Size(50, 500), Size(100, 100), Position(0, 200)),
    ],
)
def test_resolve_position_center(container, size, expected) -> None:
    assert resolve_position(Center(), container, size) == expected


def test_resolve_position_absolute() -> None:
    assert resolve_position(
        AbsolutePosition(3, 4), Size(300, 300), Size(10, 10)
    ) == Position(3, 4)


@pytest.mark.parametrize(
    "kls, args",
    [
        (Size, (-1, 0)),
        (Position, (0, -1)),
        (FitContent, (-5,)),
        (AbsoluteSize, (10, -10)),
        (AbsolutePosition, (-1, -1)),
        (Size, (1.5, 2)),
        (Size, (True, 2)),
    ],
)
def test_invalid_values(kls, args) -> None:
    with pytest.raises(ValueError):
        kls(*args)


def test_size_conversions() -> None:
    size = Size.from_tuple((3, 4))
    assert size == Size(3, 4)
    assert size.astuple() == (3, 4)
    assert Position(1, 2).astuple() == (1, 2)
    assert Size() == Size(0, 0)


def test_unknown_option() -> None:
    with pytest.raises(TypeError):
        resolve_size("fit", Size(0, 0))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        resolve_position("center", Size(0, 0), Size(0, 0))  # type: ignore[arg-type]
