"""The ``datekoans`` command.

Runs the koans, prints one line per koan and a progress summary, and
shows what to fix next.

Exit status:
    0 - every selected koan passed
    1 - a koan failed, is incomplete or raised an error
    2 - usage error (unknown suite or koan, bad setting)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

import datekoans.koans  # noqa: F401  (registers the suites)
from datekoans import __version__
from datekoans.config import Settings, load_settings, parse_log_level
from datekoans.errors import KoanLookupError
from datekoans.koan.runner import KoanResult, KoanRunner, KoanStatus

logger = logging.getLogger(__name__)

_STATUS_LABELS = {
    KoanStatus.PASSED: "PASSED",
    KoanStatus.FAILED: "FAILED",
    KoanStatus.INCOMPLETE: "TODO",
    KoanStatus.ERROR: "ERROR",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datekoans",
        description="Work through koans about local dates, times, periods and durations.",
    )
    parser.add_argument(
        "--suite",
        action="append",
        dest="suites",
        metavar="NAME",
        help="Run only this suite (repeatable). Defaults to DATEKOANS_SUITES or all suites.",
    )
    parser.add_argument(
        "--koan",
        metavar="NAME",
        help="Run only the koan with this name (or Suite.name).",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="Run every koan instead of stopping at the first one that does not pass.",
    )
    parser.add_argument(
        "--log-level",
        type=parse_log_level,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the selected koans without running them.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _merge(settings: Settings, args: argparse.Namespace) -> Settings:
    return Settings(
        log_level=args.log_level or settings.log_level,
        keep_going=settings.keep_going if args.keep_going is None else args.keep_going,
        suites=tuple(args.suites) if args.suites else settings.suites,
    )


def _print_result(result: KoanResult, out: TextIO) -> None:
    print(f"{_STATUS_LABELS[result.status]:<7} {result.suite}.{result.koan}", file=out)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _merge(load_settings(), args)
    except ValueError as e:
        print(f"datekoans: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Settings: %s", settings)

    runner = KoanRunner(keep_going=settings.keep_going)
    try:
        if args.list:
            for case in runner.collect(settings.suites, args.koan):
                print(case.qualified_name, file=out)
            return 0
        report = runner.run(
            settings.suites,
            args.koan,
            on_result=lambda result: _print_result(result, out),
        )
    except KoanLookupError as e:
        print(f"datekoans: {e}", file=sys.stderr)
        return 2

    print(report.summary(), file=out)
    failure = report.first_unsuccessful
    if failure is not None:
        print(f"\nMeditate on {failure.suite}.{failure.koan}:", file=out)
        print(f"  {failure.message}", file=out)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
