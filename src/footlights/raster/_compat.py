"""Compatibility module for optional raster dependencies."""

import functools
from typing import TYPE_CHECKING, Callable, TypeVar

F = TypeVar("F", bound=Callable)

if TYPE_CHECKING:
    import cairosvg  # type: ignore[import-untyped]

try:
    import cairosvg  # noqa: F401  # type: ignore[import-untyped,no-redef]

    HAS_CAIROSVG = True
except (ImportError, OSError):
    # OSError: the python package is present but the cairo library is not.
    HAS_CAIROSVG = False


def require_cairosvg(func: F) -> F:
    """
    Decorator to check if CairoSVG is available before calling the function.

    Raises:
        ImportError: If CairoSVG is not installed.

    Example:
        >>> @require_cairosvg
        ... def svg_to_png(svg, output):
        ...     cairosvg.svg2png(bytestring=svg.encode("utf-8"), write_to=output)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not HAS_CAIROSVG:
            raise ImportError(
                "Rasterization requires: cairosvg\n\n"
                "Install with:\n"
                "    pip install 'footlights[raster]'\n"
                "Or:\n"
                "    pip install cairosvg"
            )
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
