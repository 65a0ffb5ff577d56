"""
Rasterization of rendered documents.

**Note**: This module requires optional dependencies. Install with::

    pip install 'footlights[raster]'

The raster extra includes CairoSVG, which needs the cairo library on the
system. The engine itself never rasterizes; this is a convenience for the
command line and for callers that want a bitmap.

Example usage::

    from footlights.raster import svg_to_png

    svg_to_png(canvas.to_svg_string(), "output.png")
"""

import logging
import os
from typing import BinaryIO, Optional, Union

from footlights.raster._compat import require_cairosvg

logger = logging.getLogger(__name__)

__all__ = ["svg_to_png"]


@require_cairosvg
def svg_to_png(
    svg: str,
    output: Optional[Union[str, os.PathLike, BinaryIO]] = None,
    base_url: Optional[Union[str, os.PathLike]] = None,
) -> Optional[bytes]:
    """
    Rasterize SVG markup to PNG at its intrinsic size.

    Data URLs and local file references are resolved by CairoSVG.

    :param svg: SVG markup.
    :param output: filename or binary file-like object. When omitted, the
        PNG bytes are returned.
    :param base_url: directory or URL relative image references are resolved
        against. Defaults to the current working directory.
    :return: PNG bytes when ``output`` is `None`, otherwise `None`.
    """
    import cairosvg

    logger.debug("Rasterizing %d bytes of SVG", len(svg))
    if isinstance(output, os.PathLike):
        output = os.fspath(output)
    if isinstance(base_url, os.PathLike):
        base_url = os.fspath(base_url)
    return cairosvg.svg2png(
        bytestring=svg.encode("utf-8"), write_to=output, url=base_url, unsafe=True
    )
