"""Command line interface: convert a markdown file (or stdin) to HTML."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from apexmd import __version__
from apexmd.config import ConversionOptions, Mode
from apexmd.convert import markdown_to_html

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="apexmd", description="Convert markdown to HTML with advanced tables")
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to convert ('-' or omitted reads stdin)")
    parser.add_argument("-o", "--output", help="Write HTML to this file instead of stdout")
    parser.add_argument("--mode", choices=[mode.value for mode in Mode], help="Processor mode (default: unified)")
    parser.add_argument("--no-tables", action="store_true", help="Disable table parsing")
    parser.add_argument("--no-advanced-tables", action="store_true", help="Disable spans, footers, and captions")
    parser.add_argument("--pretty", action="store_true", default=None, help="Pretty-print the HTML output")
    parser.add_argument("--standalone", action="store_true", default=None, help="Emit a complete HTML document")
    parser.add_argument("--title", help="Document title for --standalone (default: Document)")
    parser.add_argument("--css", metavar="PATH", help="Stylesheet link for --standalone instead of the default style")
    parser.add_argument("--caption-position", choices=["above", "below"], help="Where table captions go (default: above)")
    parser.add_argument("--aria", action="store_true", default=None, help="Add ARIA attributes to tables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")

    overrides = {
        "mode": args.mode,
        "caption_position": args.caption_position,
        "pretty": args.pretty,
        "standalone": args.standalone,
        "enable_aria": args.aria,
        "title": args.title,
        "stylesheet": args.css,
    }
    if args.no_tables:
        overrides["enable_tables"] = False
    if args.no_advanced_tables:
        overrides["advanced_tables"] = False

    try:
        options = ConversionOptions.from_env(**overrides)
    except (ValueError, ValidationError) as exc:
        parser.error(str(exc))

    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(args.input).read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot read {args.input}: {exc}")

    html = markdown_to_html(text, options)

    if args.output:
        Path(args.output).write_text(html, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(html), args.output)
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
