"""Command-line interface for svgpathinfo."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from lxml import etree

from . import __version__
from .config import Config, load_config
from .path_processor import PathProcessor
from .svg import SVGDocument

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Parse, normalize and reverse SVG path data."
    )
    parser.add_argument("path", nargs="?", help="SVG path data, e.g. 'M0,0 L10,10'")
    parser.add_argument(
        "--svg", type=Path, help="Process every <path> of this SVG file instead"
    )
    parser.add_argument(
        "--absolute", "-a", action="store_true", help="Convert to absolute coordinates"
    )
    parser.add_argument(
        "--no-smooth",
        "-s",
        action="store_true",
        help="Rewrite smooth curves as explicit curves (implies --absolute)",
    )
    parser.add_argument(
        "--reverse", "-r", action="store_true", help="Reverse a cubic bezier path"
    )
    parser.add_argument(
        "--precision", "-p", type=int, help="Decimals per number (default: 6)"
    )
    parser.add_argument(
        "--config", "-c", type=Path, help="Configuration YAML file path"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log each parsing step"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(args)


def setup_logging(config: Config, verbose: bool = False) -> None:
    """Configure logging from the configuration's logging section."""
    level = "INFO" if verbose else str(config.get("logging.level", "WARNING")).upper()
    logging.basicConfig(
        level=level,
        format=config.get("logging.format"),
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def process(args, config: Config) -> List[str]:
    """Produce one output line per input path.

    Args:
        args: Parsed command line arguments
        config: Configuration object

    Returns:
        List of path data strings
    """
    processor = PathProcessor(config.config)

    overrides = {
        "absolute": True if args.absolute or args.no_smooth else None,
        "no_smooth": True if args.no_smooth else None,
        "verbose": True if args.verbose else None,
    }

    if args.svg:
        document = SVGDocument(args.svg)
        sources = [svg_path.path_data for svg_path in document.get_paths()]
    else:
        sources = [args.path]

    if args.reverse:
        return [processor.reverse(source) for source in sources]
    return [processor.normalize(source, **overrides) for source in sources]


def main(argv=None):
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if (args.path is None) == (args.svg is None):
        print("Error: Give either path data or --svg, but not both.", file=sys.stderr)
        return 1

    if args.svg and not args.svg.exists():
        print(f"Error: Input file '{args.svg}' does not exist.", file=sys.stderr)
        return 1

    # Validate config file if provided
    if args.config and not args.config.exists():
        print(f"Error: Config file '{args.config}' does not exist.", file=sys.stderr)
        return 1

    config = load_config(args.config)
    if args.precision is not None:
        config.set("output.precision", args.precision)
    if not config.validate():
        print("Error: Invalid configuration.", file=sys.stderr)
        return 1
    setup_logging(config, args.verbose)

    try:
        lines = process(args, config)
    except (ValueError, etree.XMLSyntaxError) as e:
        logger.debug("Processing failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
