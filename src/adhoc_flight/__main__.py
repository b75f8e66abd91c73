"""Entrypoint for printing saved query results: python -m adhoc_flight FILE."""

from __future__ import annotations

import argparse
import logging
import sys

import pyarrow as pa

from adhoc_flight.arrow_ipc import read_from_binary_file
from adhoc_flight.config import ConsoleConfig
from adhoc_flight.console import print_exception_on_closed, print_preamble, print_results

logger = logging.getLogger("adhoc_flight")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="adhoc-flight",
        description="Print query results saved as an Arrow IPC stream file",
    )
    parser.add_argument("path", help="File written by write_to_binary_file")
    args = parser.parse_args(argv)

    try:
        config = ConsoleConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    print_preamble()
    try:
        table = read_from_binary_file(args.path)
    except (OSError, pa.ArrowInvalid) as e:
        logger.debug("Failed to read %s", args.path)
        print_exception_on_closed(e)
        return 1

    print_results(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
