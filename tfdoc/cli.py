"""Command-line entry point for generating Markdown docs from Terraform files.

Usage: ``tfdoc [-t] [PATH]``

If PATH is omitted, the current directory is used. ``-t`` renders tables
instead of lists.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tfdoc.errors import TfdocError
from tfdoc.run_app import run_app


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the tfdoc command."""
    ap = argparse.ArgumentParser(
        prog="tfdoc",
        description="Generate Markdown documentation from Terraform (*.tf) files.",
    )
    ap.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("./"),
        help="Directory containing the *.tf files (default: current directory)",
    )
    ap.add_argument(
        "-t",
        "--table",
        action="store_true",
        help="Output the documentation as tables rather than lists",
    )
    ap.add_argument(
        "-c",
        "--config",
        help="Path to configuration file (default: PATH/.tfdoc.yml)",
    )
    ap.add_argument(
        "--no-title-filter",
        action="store_true",
        help="Keep every comment block, not only the 'Title: ' block",
    )
    ap.add_argument(
        "--no-files",
        action="store_true",
        help="Do not list the scanned files",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run tfdoc; return 0 on success, 1 after printing an error to stderr."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return run_app(args)
    except (OSError, TfdocError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
