"""``openpid-docgen`` command line entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from openpid_docgen.config import DocgenConfig
from openpid_docgen.export.book import document
from openpid_docgen.loader import SpecError, load_spec
from openpid_docgen.render import RenderError

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openpid-docgen",
        description="Generate mdbook documentation from an OpenPID spec.",
    )
    parser.add_argument(
        "spec",
        nargs="?",
        default="openpid.toml",
        type=Path,
        help="OpenPID spec file (default: ./openpid.toml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="outputs",
        type=Path,
        help="Output directory for the book (default: ./outputs)",
    )
    parser.add_argument(
        "--no-build",
        action="store_true",
        help="Write markdown and diagrams but do not run mdbook",
    )
    parser.add_argument("--d2", dest="d2_command", help="d2 executable to use")
    parser.add_argument("--mdbook", dest="mdbook_command", help="mdbook executable to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DocgenConfig.from_env(
        d2_command=args.d2_command,
        mdbook_command=args.mdbook_command,
        build_site=False if args.no_build else None,
    )
    try:
        pid = load_spec(args.spec)
        document(pid, args.output, config)
    except (SpecError, RenderError) as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
