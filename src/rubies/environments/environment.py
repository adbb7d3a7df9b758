"""Snapshot of the process environment an activation works from."""
from typing import Mapping, Optional

from rubies.errors import UsageError
from rubies.logging import get_logger
from rubies.types import (
    ACTIVATED_RUBY_BIN_VAR,
    ACTIVATED_SANDBOX_BIN_VAR,
    GEM_HOME_VAR,
    GEM_PATH_VAR,
    PATH_VAR,
    ActivationEnvironment,
)

logger = get_logger(__name__)


def _optional(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(name) or None


def read_environment(environ: Mapping[str, str]) -> ActivationEnvironment:
    """Read the current and previously activated configuration."""
    if PATH_VAR not in environ:
        raise UsageError(f"{PATH_VAR} is not set", details={"variable": PATH_VAR})

    env = ActivationEnvironment(
        search_path=environ[PATH_VAR],
        gem_home=_optional(environ, GEM_HOME_VAR),
        gem_path=_optional(environ, GEM_PATH_VAR),
        activated_ruby_bin=_optional(environ, ACTIVATED_RUBY_BIN_VAR),
        activated_sandbox_bin=_optional(environ, ACTIVATED_SANDBOX_BIN_VAR),
    )

    logger.debug(
        {
            "event": "environment_read",
            "activated_ruby_bin": env.activated_ruby_bin,
            "activated_sandbox_bin": env.activated_sandbox_bin,
        }
    )

    return env
