"""
Error taxonomy.

- :py:class:`ConfigurationError`: the document description is incomplete or
  malformed. Recoverable; the caller may fix the entry and retry.
- :py:class:`UnimplementedVariantError`: a declared layer variant that cannot
  be rendered was selected. Rendering aborts without emitting markup.
- :py:class:`ImageSizeError`: the image size provider could not resolve a
  source reference.
"""

from typing import Optional


class FootlightsError(Exception):
    """Base error of the footlights package."""


class ConfigurationError(FootlightsError, ValueError):
    """Missing or invalid document configuration."""


class StyleNotFoundError(ConfigurationError):
    """A structure slot references a style that is not in the collection."""

    def __init__(self, style: str, slot_id: Optional[str] = None):
        self.style = style
        self.slot_id = slot_id
        message = "Style not found: %r" % style
        if slot_id is not None:
            message += " (referenced by layer %r)" % slot_id
        super().__init__(message)


class MissingAttributeError(ConfigurationError):
    """A style lacks an attribute that its layer kind requires."""

    def __init__(self, style: str, kind: str, attribute: str):
        self.style = style
        self.kind = kind
        self.attribute = attribute
        super().__init__(
            "Style %r is used by a %s layer but has no %r attribute"
            % (style, kind, attribute)
        )


class UnimplementedVariantError(FootlightsError, NotImplementedError):
    """A declared layer variant has no rendering."""


class ImageSizeError(FootlightsError):
    """The intrinsic size of an image could not be determined."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        shown = source if len(source) <= 64 else source[:61] + "..."
        super().__init__("Cannot determine image size of %s: %s" % (shown, reason))
