"""Command-line interface for the watch progress tracker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import TrackerConfig
from .exceptions import HgidrError
from .runner import Intent, TrackerRunner

LOGGER = logging.getLogger("hgidr.cli")

MISSING_NAME_MESSAGE = "You need to specify the name of the series"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hgidr", description="Track the last watched episode of TV series")
    parser.add_argument("name", nargs="?", help="Name of the series (quote names containing spaces)")
    parser.add_argument("--newseries", action="store_true", help="Create a new series")
    parser.add_argument("--ep", action="store_true", help="Increment the episode counter of the series")
    parser.add_argument("--season", action="store_true", help="Increment the season counter of the series")
    parser.add_argument("--set-ep", type=int, default=0, metavar="N", help="Set the episode counter of the series")
    parser.add_argument("--set-season", type=int, default=0, metavar="N", help="Set the season counter of the series")
    parser.add_argument("--data-file", default=None, help="Path to the data file (default: XDG data dir)")
    parser.add_argument("--export", default=None, metavar="PATH", help="Export all series to a .json or .yaml file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def intent_from_args(args: argparse.Namespace) -> Intent:
    return Intent(
        name=args.name,
        new_series=args.newseries,
        increment_episode=args.ep,
        increment_season=args.season,
        set_episode=args.set_ep,
        set_season=args.set_season,
    )


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=_log_level(args.verbose), format="%(asctime)s %(levelname)s %(message)s")

    export_path = Path(args.export) if args.export else None
    if not args.name and export_path is None:
        print(MISSING_NAME_MESSAGE)
        return 0

    config = TrackerConfig.from_env(data_path=Path(args.data_file) if args.data_file else None)
    runner = TrackerRunner(config)
    try:
        if args.name:
            runner.run(intent_from_args(args), export_path=export_path)
        else:
            runner.export_only(export_path)
    except HgidrError as exc:
        LOGGER.debug("Run failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
