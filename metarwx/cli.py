"""Command line front end: fetch or decode a METAR and print a report."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from .errors import FetchError
from .fetch import DEFAULT_TIMEOUT, fetch_metar
from .metar import Metar
from .render import print_report

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metarwx", description="Decode the latest METAR of a station"
    )
    parser.add_argument("station", nargs="?", help="ICAO station identifier")
    parser.add_argument(
        "-f",
        "--fahrenheit",
        action="store_true",
        help="Print temperature in Fahrenheit",
    )
    parser.add_argument(
        "-d",
        "--decode",
        metavar="REPORT",
        help="Decode the given report instead of fetching one",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.decode:
        metar_str = args.decode
    elif args.station:
        try:
            metar_str = fetch_metar(args.station, timeout=args.timeout)
        except FetchError as ex:
            print(f"Cannot load station data. {ex}", file=sys.stderr)
            return 1
    else:
        parser.print_usage(sys.stderr)
        return 1

    logger.debug("Decoding %s", metar_str)
    console = Console()
    console.print(metar_str, markup=False, highlight=False)
    print_report(Metar.from_raw_string(metar_str), args.fahrenheit, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
