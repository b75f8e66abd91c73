"""Configuration management — console output settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ConsoleConfig:
    """Console reporting configuration.

    ``legacy_spelling`` keeps the historic "sucessfully" wording of the
    authentication message, which downstream scripts match byte for byte.
    """

    legacy_spelling: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ConsoleConfig:
        """Build ConsoleConfig from environment variables.

        Raises ValueError if ADHOC_FLIGHT_LOG_LEVEL is not a logging level name.
        """
        log_level = os.environ.get("ADHOC_FLIGHT_LOG_LEVEL", "INFO").upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(
                f"ADHOC_FLIGHT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got {log_level!r}"
            )
        return cls(
            legacy_spelling=legacy_spelling_from_env(),
            log_level=log_level,
        )


def legacy_spelling_from_env() -> bool:
    """Read ADHOC_FLIGHT_LEGACY_SPELLING; anything but "true" turns it off."""
    return os.environ.get("ADHOC_FLIGHT_LEGACY_SPELLING", "true").lower() == "true"
