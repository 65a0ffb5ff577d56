import argparse
import logging
import os
import sys
from typing import BinaryIO, Optional

from footlights.config.resolver import build_canvas
from footlights.config.structure import Document, dump_document, load_document
from footlights.config.style import StyleCollection
from footlights.errors import FootlightsError
from footlights.providers import (
    PillowImageSizeProvider,
    encode_data_url,
    relocate_path,
)
from footlights.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="footlights command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render", help="Render a document to SVG or PNG"
    )
    render_parser.add_argument("config", help="Document description (YAML)")
    render_parser.add_argument(
        "output", help="Output file, SVG when it ends with .svg, PNG otherwise"
    )
    render_parser.add_argument(
        "--image",
        help="Value of the ${image} placeholder; image data piped to stdin wins",
    )

    dump_parser = subparsers.add_parser(
        "dump-default", help="Write the default document description"
    )
    dump_parser.add_argument("output", nargs="?", help="Output file, default stdout")

    show_parser = subparsers.add_parser("show", help="Show the parsed document")
    show_parser.add_argument("config", help="Document description (YAML)")

    return parser.parse_args(argv)


def read_piped_image(stdin: Optional[BinaryIO] = None) -> Optional[str]:
    """Read image bytes piped to stdin as a data URL, if any."""
    if stdin is None:
        if sys.stdin is None or sys.stdin.isatty():
            return None
        stdin = sys.stdin.buffer
    data = stdin.read()
    if not data:
        return None
    logger.debug("Read %d bytes of image data from stdin", len(data))
    return encode_data_url(data)


def relocate_images(styles: StyleCollection, source_root: str, target_root: str) -> None:
    """
    Rewrite relative image paths of the styles, written against the config
    file directory, to resolve from the output directory. The size probe and
    the emitted ``href`` then refer to the same file.
    """
    for name in styles:
        style = styles[name]
        if style.image is not None:
            style.image = relocate_path(style.image, source_root, target_root)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("footlights")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    try:
        if args.command == "render":
            substitutions = {}
            image = read_piped_image() or args.image
            if image:
                substitutions["image"] = image
            document = load_document(args.config, **substitutions)
            output_root = os.path.dirname(os.path.abspath(args.output))
            relocate_images(
                document.styles, os.path.dirname(os.path.abspath(args.config)), output_root
            )
            canvas = build_canvas(
                document.structure, document.styles, PillowImageSizeProvider(output_root)
            )
            svg = canvas.to_svg_string()
            if args.output.lower().endswith(".svg"):
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(svg)
            else:
                from footlights.raster import svg_to_png

                svg_to_png(svg, args.output, base_url=output_root)
            logger.info("Wrote %s", args.output)

        elif args.command == "dump-default":
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    dump_document(Document(), f)
            else:
                dump_document(Document(), sys.stdout)

        elif args.command == "show":
            pprint(load_document(args.config))

    except (FootlightsError, ImportError, OSError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    main()
