"""
High-level API for composing layered documents.

The main entry point is :py:class:`~footlights.api.canvas.Canvas`, an
ordered stack of layers that lays itself out and renders to SVG markup.

Key modules:

- :py:mod:`footlights.api.foundation`: geometry values and policy types
- :py:mod:`footlights.api.layers`: base class shared by the layer variants
- :py:mod:`footlights.api.background`: solid and gradient backgrounds
- :py:mod:`footlights.api.image`: raster images with rounding and shadows
- :py:mod:`footlights.api.shape`: basic shapes
- :py:mod:`footlights.api.effects`: drop shadow effect
- :py:mod:`footlights.api.canvas`: layout and document assembly
"""
