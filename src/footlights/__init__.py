"""
footlights: compose stacked visual layers into an SVG document.

A document is described declaratively: an ordered *structure* of layer
slots, each referencing a named *style*. The engine resolves the size and
position of every layer and emits a nested SVG document, which can then be
rasterized by an external renderer.

Basic usage::

    from footlights import Canvas, load_document, build_canvas
    from footlights.providers import PillowImageSizeProvider

    document = load_document("template.yml")
    canvas = build_canvas(
        document.structure, document.styles, PillowImageSizeProvider()
    )
    svg = canvas.to_svg_string()

Architecture:

- :py:mod:`footlights.api`: layers, layout and document assembly
- :py:mod:`footlights.config`: structure and style descriptions
- :py:mod:`footlights.providers`: image size probing
- :py:mod:`footlights.raster`: optional SVG to PNG conversion
"""

from footlights.api.canvas import Canvas
from footlights.config.resolver import build_canvas
from footlights.config.structure import Document, load_document
from footlights.version import __version__

__all__ = ["Canvas", "Document", "build_canvas", "load_document", "__version__"]
