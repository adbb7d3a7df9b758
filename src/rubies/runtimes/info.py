"""Query a ruby interpreter for its engine, version and gem path."""

import asyncio
import os
import shutil
from typing import Protocol

from rubies.errors import ResolutionError
from rubies.logging import get_logger
from rubies.types import RubyInfo

logger = get_logger(__name__)

RUBY_BINARY = "ruby"

# Prints the three-line triple: engine, version, gem path list
RUBY_INFO_SCRIPT = (
    "require 'rubygems'; "
    "engine = defined?(RUBY_ENGINE) ? RUBY_ENGINE : 'ruby'; "
    "puts [engine, RUBY_VERSION, Gem.path.join(':')].join(\"\\n\")"
)


class RubyInfoResolver(Protocol):
    """Looks up the RubyInfo of a ruby installation."""

    async def from_ruby_bin_path(self, bin_dir: str) -> RubyInfo: ...

    async def from_search_path(self, search_path: str) -> RubyInfo: ...


def parse_ruby_info(output: str, command: str) -> RubyInfo:
    """Parse the self-query output into a RubyInfo."""
    fields = output.rstrip("\n").split("\n")
    if len(fields) != 3:
        raise ResolutionError(
            f"Ruby info had wrong length: expected 3 lines, got {len(fields)}",
            command=command,
            output=output,
        )
    if not all(fields):
        raise ResolutionError(
            "Ruby info contained an empty field", command=command, output=output
        )
    return RubyInfo(*fields)


async def query_ruby_info(ruby_command: str) -> RubyInfo:
    """Run ``ruby_command`` with the info script and parse what it prints."""

    logger.debug({"event": "ruby_info_query", "cmd": ruby_command})

    try:
        process = await asyncio.create_subprocess_exec(
            ruby_command,
            "-e",
            RUBY_INFO_SCRIPT,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ResolutionError(
            f"Failed to run {ruby_command}: {e}", command=ruby_command
        ) from e

    stdout, stderr = await process.communicate()

    if stderr:
        logger.debug(
            {
                "event": "ruby_info_stderr",
                "cmd": ruby_command,
                "output": stderr.decode(errors="replace"),
            }
        )

    logger.debug(
        {"event": "ruby_info_complete", "cmd": ruby_command, "returncode": process.returncode}
    )

    if process.returncode != 0:
        raise ResolutionError(
            f"Failed to get Ruby info from {ruby_command} (exit code {process.returncode})",
            command=ruby_command,
            returncode=process.returncode,
            output=stderr.decode(errors="replace") if stderr else None,
        )

    try:
        output = stdout.decode()
    except UnicodeDecodeError as e:
        raise ResolutionError(
            f"Ruby info from {ruby_command} is not valid UTF-8",
            command=ruby_command,
            output=repr(stdout),
        ) from e

    return parse_ruby_info(output, ruby_command)


class SubprocessResolver:
    """Resolves RubyInfo by spawning the ruby in question."""

    def __init__(self, ruby_binary: str = RUBY_BINARY):
        self.ruby_binary = ruby_binary

    async def from_ruby_bin_path(self, bin_dir: str) -> RubyInfo:
        return await query_ruby_info(os.path.join(bin_dir, self.ruby_binary))

    async def from_search_path(self, search_path: str) -> RubyInfo:
        ruby_command = shutil.which(self.ruby_binary, path=search_path)
        if not ruby_command:
            raise ResolutionError(
                f"No {self.ruby_binary} found on PATH", command=self.ruby_binary
            )
        return await query_ruby_info(ruby_command)
