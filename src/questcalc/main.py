"""Command-line entrypoint for questcalc."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from questcalc.config import Settings, get_settings
from questcalc.console.io_manager import IOManager
from questcalc.console.runtime import ManualSolver, run_session
from questcalc.domain.enums import OutputLevel
from questcalc.domain.session import SessionContext
from questcalc.repository.catalog_store import load_catalog

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enter quest lineups and turn their solutions into battle replays"
    )
    parser.add_argument("--macro-file", help="Replay answers from this file before asking interactively")
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Do not echo prompts and answers while replaying the macro file",
    )
    parser.add_argument(
        "--verbosity",
        type=int,
        choices=[level.value for level in OutputLevel],
        help="Output level from 0 (nothing) to 4 (detailed)",
    )
    parser.add_argument("--catalog", help="Catalog JSON file to use instead of the bundled one")
    parser.add_argument("--json-output", help="Write the solved instances to this JSON file")
    return parser


def apply_arguments(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return ``settings`` with command line overrides applied."""

    updates: dict[str, object] = {}
    if args.macro_file:
        updates["macro_file"] = Path(args.macro_file)
    if args.silent:
        updates["show_queries"] = False
    if args.verbosity is not None:
        updates["output_level"] = OutputLevel(args.verbosity)
    if args.catalog:
        updates["catalog_path"] = Path(args.catalog)
    if args.json_output:
        updates["json_output"] = Path(args.json_output)
    return settings.model_copy(update=updates)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_arguments(get_settings(), args)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    catalog = load_catalog(settings.catalog_path)
    session = SessionContext(catalog)
    io = IOManager(output_level=settings.output_level)
    if settings.macro_file is not None:
        io.init_macro_file(settings.macro_file, settings.show_queries)

    try:
        run_session(io, session, ManualSolver(io), json_output=settings.json_output)
        io.halt_execution()
    except (EOFError, KeyboardInterrupt):
        print()  # newline on ^D/^C
        logger.info("input closed, exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
