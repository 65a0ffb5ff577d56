"""
Image size providers.

:py:class:`PillowImageSizeProvider` probes local files and base64 data URLs
with Pillow. Remote ``http(s)`` images are declined.
:py:class:`StaticImageSizeProvider` answers from a fixed mapping, which is
handy when the sizes are known up front.
"""

import base64
import binascii
import io
import logging
import os
import re
from typing import Mapping, Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from footlights.errors import ImageSizeError

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(
    r"^data:(?P<mime>[^;,]*)(?P<params>(;[^;,]*)*),(?P<data>.*)$", re.DOTALL
)


def encode_data_url(data: bytes, mime: str = "image/png") -> str:
    """Encode binary image data as a base64 data URL."""
    return "data:%s;base64,%s" % (mime, base64.b64encode(data).decode("ascii"))


def decode_data_url(url: str) -> bytes:
    """
    Decode the payload of a base64 data URL.

    :raise ValueError: if ``url`` is not a base64 data URL.
    """
    match = _DATA_URL.match(url)
    if match is None or ";base64" not in match.group("params"):
        raise ValueError("Not a base64 data URL")
    payload = re.sub(r"\s+", "", match.group("data"))
    return base64.b64decode(payload, validate=True)


def is_local_path(source: str) -> bool:
    """Whether a source reference is a file path rather than a URL."""
    return not source.startswith(("data:", "http://", "https://"))


def relocate_path(
    source: str,
    source_root: Union[str, os.PathLike],
    target_root: Union[str, os.PathLike],
) -> str:
    """
    Rewrite a relative path written against ``source_root`` so that it points
    at the same file from ``target_root``.

    URLs and absolute paths are returned unchanged.

    Example::

        relocate_path("input.png", "/work", "/work/out")  # "../input.png"
    """
    if not is_local_path(source) or os.path.isabs(source):
        return source
    path = os.path.join(source_root, source)
    try:
        return os.path.relpath(path, target_root)
    except ValueError:
        # No relative path between drives on Windows.
        return os.path.abspath(path)


class PillowImageSizeProvider:
    """
    Probe image sizes with Pillow.

    :param root: directory relative paths are resolved against, default is
        the current working directory.
    """

    def __init__(self, root: Optional[Union[str, os.PathLike]] = None):
        self.root = root

    def get_image_size(self, source: str) -> Tuple[int, int]:
        if source.startswith("data:"):
            try:
                data = decode_data_url(source)
            except (ValueError, binascii.Error) as e:
                raise ImageSizeError(source, str(e)) from e
            return self._probe(io.BytesIO(data), source)
        if not is_local_path(source):
            raise ImageSizeError(source, "remote images are not supported")
        path = source
        if self.root is not None and not os.path.isabs(path):
            path = os.path.join(self.root, path)
        return self._probe(path, source)

    def _probe(self, fp: Union[str, io.BytesIO], source: str) -> Tuple[int, int]:
        try:
            with Image.open(fp) as image:
                width, height = image.size
        except UnidentifiedImageError as e:
            raise ImageSizeError(source, "unsupported image format") from e
        except OSError as e:
            raise ImageSizeError(source, e.strerror or str(e)) from e
        logger.debug("Probed image size %dx%d", width, height)
        return (width, height)


class StaticImageSizeProvider:
    """Answer image sizes from a mapping of source to ``(width, height)``."""

    def __init__(self, sizes: Mapping[str, Tuple[int, int]]):
        self.sizes = dict(sizes)

    def get_image_size(self, source: str) -> Tuple[int, int]:
        try:
            width, height = self.sizes[source]
        except KeyError:
            raise ImageSizeError(source, "unknown image") from None
        return (width, height)
