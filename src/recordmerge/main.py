#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from recordmerge.adapters.json_file import RecordFileError
from recordmerge.app import merge_files
from recordmerge.config import (
    ConfigurationError,
    configure_logging,
    get_merge_config,
    parse_log_level,
)
from recordmerge.domain.merge import BothMissingError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="recordmerge",
        description="Three-way merge driver for JSON record collections",
    )
    parser.add_argument("ancestor", help="Common ancestor version (git %%O)")
    parser.add_argument("current", help="Current branch version (git %%A)")
    parser.add_argument("other", help="Other branch version (git %%B)")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Where to write the merged records (defaults to the current file)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the diff report without writing the merged records",
    )
    parser.add_argument(
        "--skip-ancestor-only",
        action="store_true",
        help="Drop ids deleted on both sides instead of failing",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (defaults to RECORDMERGE_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = get_merge_config()
        if parsed_args.log_level is not None:
            config = replace(config, log_level=parse_log_level(parsed_args.log_level))
        if parsed_args.skip_ancestor_only:
            config = replace(config, ancestor_only="skip")
    except ConfigurationError as exc:
        configure_logging()
        log.error("Configuration error: %s", exc)  # noqa: TRY400
        sys.exit(2)

    configure_logging(level=config.log_level)

    try:
        result = merge_files(
            parsed_args.ancestor,
            parsed_args.current,
            parsed_args.other,
            output=parsed_args.output,
            config=config,
            dry_run=parsed_args.dry_run,
        )
    except (RecordFileError, BothMissingError):
        log.exception("Merge failed, nothing was written")
        sys.exit(1)

    for line in result.report:
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
