from __future__ import annotations

import os
from dataclasses import dataclass

from selectorkit.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> SelectorkitConfig:
        """Create config from environment variables.

        Reads SELECTORKIT_LOG_LEVEL; unset values keep their defaults.
        Raises ConfigurationError for an unknown level name.
        """
        log_level = os.environ.get("SELECTORKIT_LOG_LEVEL", cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid SELECTORKIT_LOG_LEVEL {log_level!r}; "
                f"expected one of {', '.join(LOG_LEVELS)}"
            )
        return cls(log_level=log_level)
