"""Console reporting — status lines and result dumps for the Flight SQL client."""

from __future__ import annotations

import logging
import sys
import traceback

from adhoc_flight.arrow_ipc import ResultBatch, as_record_batch, content_to_tsv
from adhoc_flight.config import ConsoleConfig, legacy_spelling_from_env

logger = logging.getLogger(__name__)

# Message kind → line prefix
_PREFIXES: dict[str, str] = {
    "error": "[ERROR]",
    "info": "[INFO]",
}

# Section kind → divider printed on both sides of the title
_FILLERS: dict[str, str] = {
    "header": "-" * 18,
    "footer": "=" * 18,
}


def _check_labels(table: dict[str, str], name: str) -> None:
    for kind, label in table.items():
        if not label:
            raise ValueError(f"{name} label for {kind!r} must be non-empty")


_check_labels(_PREFIXES, "prefix")
_check_labels(_FILLERS, "filler")


def format_prefixed(kind: str, message: str) -> str:
    """Format ``message`` as ``<prefix> <message>``."""
    return f"{_PREFIXES[kind]} {message}"


def format_framed(kind: str, message: str) -> str:
    """Format ``message`` as ``<filler> <message> <filler>``."""
    filler = _FILLERS[kind]
    return f"{filler} {message} {filler}"


def print_authenticated(host: str, port: int, config: ConsoleConfig | None = None) -> None:
    """Print that the client has authenticated with the server at host:port.

    Without a config the spelling follows ADHOC_FLIGHT_LEGACY_SPELLING.
    """
    legacy = config.legacy_spelling if config is not None else legacy_spelling_from_env()
    outcome = "sucessfully" if legacy else "successfully"
    print(format_prefixed("info", f"Authenticated with {host}:{port} {outcome}"))


def print_preamble() -> None:
    print(format_prefixed("info", "Printing query results."))


def print_running_query(query: str) -> None:
    """Announce that a query is running.

    The query text is only logged, never printed with the announcement.
    """
    logger.debug("Running query: %s", query)
    print(format_prefixed("info", "Running query."))


def print_results(batch: ResultBatch) -> None:
    """Print the results as TSV between a header and a row-count footer."""
    record_batch = as_record_batch(batch)
    print(format_framed("header", "Query results"))
    print(content_to_tsv(record_batch))
    print(format_framed("footer", f"Number of records retrieved: {record_batch.num_rows}"))


def print_exception_on_closed(error: BaseException) -> None:
    """Print an error raised while closing a resource, with its traceback on stderr."""
    print(format_prefixed("error", str(error)))
    traceback.print_exception(type(error), error, error.__traceback__, file=sys.stderr)
