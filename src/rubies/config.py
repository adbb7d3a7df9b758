"""Settings read from the process environment at startup."""
import logging
import os
from typing import Mapping

from rubies.errors import UsageError
from rubies.logging import DEFAULT_LOG_LEVEL
from rubies.types import Settings

DEFAULT_RUBIES_ROOT = "~/.rubies"

RUBIES_ROOT_VAR = "RUBIES_ROOT"
LOG_LEVEL_VAR = "RUBIES_LOG_LEVEL"


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Build settings from the given environment mapping."""
    root = environ.get(RUBIES_ROOT_VAR) or DEFAULT_RUBIES_ROOT
    log_level = (environ.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()

    if not isinstance(logging.getLevelName(log_level), int):
        raise UsageError(
            f"Unknown log level: {log_level}", details={"variable": LOG_LEVEL_VAR}
        )

    return Settings(
        rubies_root=os.path.expanduser(root),
        log_level=log_level,
    )
