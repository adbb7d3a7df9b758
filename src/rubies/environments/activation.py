"""Compute the variable changes for activating and deactivating a ruby."""

import os

from rubies.logging import get_logger
from rubies.paths import prepend_to_path, remove_from_path
from rubies.runtimes.info import RubyInfoResolver
from rubies.types import (
    ACTIVATED_RUBY_BIN_VAR,
    ACTIVATED_SANDBOX_BIN_VAR,
    GEM_HOME_VAR,
    GEM_PATH_VAR,
    PATH_VAR,
    ActivationEnvironment,
    RubyInfo,
    VariableMapping,
)

logger = get_logger(__name__)

SANDBOX_LIB_DIR = ".lib"


def runtime_bin_dir(rubies_root: str, ruby_name: str) -> str:
    """Bin directory of the named ruby under the rubies root."""
    return f"{rubies_root}/{ruby_name}/bin"


def sandbox_gem_home(sandbox_dir: str, info: RubyInfo) -> str:
    """Gem home for ``info`` inside the sandbox directory."""
    sandbox = os.path.abspath(os.path.expanduser(sandbox_dir))
    return f"{sandbox}/{SANDBOX_LIB_DIR}/{info.engine}/{info.version}"


async def compute_activate(
    env: ActivationEnvironment,
    ruby_name: str,
    sandbox_dir: str,
    *,
    resolver: RubyInfoResolver,
    rubies_root: str,
) -> VariableMapping:
    """Variables that activate ``ruby_name`` with gems isolated in ``sandbox_dir``.

    Entries inserted by a previous activation are removed from PATH before
    the new ones are prepended, so activating repeatedly never grows PATH.
    """
    ruby_bin = runtime_bin_dir(rubies_root, ruby_name)
    info = await resolver.from_ruby_bin_path(ruby_bin)

    sandboxed_gems = sandbox_gem_home(sandbox_dir, info)
    sandboxed_bin = f"{sandboxed_gems}/bin"

    current_path = remove_from_path(env.search_path, env.activated_bins)

    logger.info(
        {
            "event": "activating_ruby",
            "ruby": ruby_name,
            "engine": info.engine,
            "version": info.version,
            "sandbox": sandboxed_gems,
        }
    )

    return {
        PATH_VAR: prepend_to_path(current_path, sandboxed_bin, ruby_bin),
        GEM_HOME_VAR: sandboxed_gems,
        GEM_PATH_VAR: f"{sandboxed_gems}:{info.gem_path}",
        ACTIVATED_RUBY_BIN_VAR: ruby_bin,
        ACTIVATED_SANDBOX_BIN_VAR: sandboxed_bin,
    }


async def compute_deactivate(
    env: ActivationEnvironment, *, resolver: RubyInfoResolver
) -> VariableMapping:
    """Variables that undo the last activation recorded in ``env``."""
    # Fails when no working ruby is on the current PATH
    info = await resolver.from_search_path(env.search_path)

    logger.info(
        {
            "event": "deactivating_ruby",
            "engine": info.engine,
            "version": info.version,
            "ruby_bin": env.activated_ruby_bin,
        }
    )

    return {
        PATH_VAR: remove_from_path(env.search_path, env.activated_bins),
        GEM_HOME_VAR: None,
        GEM_PATH_VAR: None,
        ACTIVATED_RUBY_BIN_VAR: None,
        ACTIVATED_SANDBOX_BIN_VAR: None,
    }
