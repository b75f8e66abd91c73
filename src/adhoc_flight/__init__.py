"""Result helpers for the example Flight SQL client."""

from adhoc_flight.arrow_ipc import (
    batch_to_ipc,
    content_to_tsv,
    read_from_binary_file,
    write_to_binary_file,
)
from adhoc_flight.config import ConsoleConfig
from adhoc_flight.console import (
    print_authenticated,
    print_exception_on_closed,
    print_preamble,
    print_results,
    print_running_query,
)

__all__ = [
    "ConsoleConfig",
    "batch_to_ipc",
    "content_to_tsv",
    "print_authenticated",
    "print_exception_on_closed",
    "print_preamble",
    "print_results",
    "print_running_query",
    "read_from_binary_file",
    "write_to_binary_file",
]
