"""Command line entry point.

Everything printed to stdout is evaluated by the calling shell, so output
is only written once the whole command has succeeded.
"""

import argparse
import asyncio
import os
import sys
from typing import Mapping, Optional, Sequence

from rubies.config import load_settings
from rubies.environments.activation import compute_activate, compute_deactivate
from rubies.environments.environment import read_environment
from rubies.errors import RubiesError, UsageError, log_error
from rubies.logging import DEFAULT_LOG_LEVEL, configure_logging, get_logger
from rubies.runtimes.info import RubyInfoResolver, SubprocessResolver
from rubies.shell import format_ruby_info, format_vars
from rubies.types import Settings

logger = get_logger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="rubies",
        add_help=False,
        description="Switch between installed rubies by emitting shell code for eval.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser(
        "ruby-info",
        add_help=False,
        help="Print engine, version and gem path of the ruby on PATH.",
    )

    activate = subparsers.add_parser(
        "activate",
        add_help=False,
        help="Activate a ruby with gems sandboxed in a directory.",
    )
    activate.add_argument("name", help="Name of the ruby under the rubies root.")
    activate.add_argument("sandbox", help="Directory that holds the sandboxed gems.")

    subparsers.add_parser(
        "deactivate", add_help=False, help="Undo the current activation."
    )

    return parser


async def run_command(
    args: argparse.Namespace,
    environ: Mapping[str, str],
    settings: Settings,
    resolver: RubyInfoResolver,
) -> str:
    """Run the parsed subcommand and return the text to print."""
    env = read_environment(environ)

    if args.command == "ruby-info":
        info = await resolver.from_search_path(env.search_path)
        return format_ruby_info(info)
    if args.command == "activate":
        variables = await compute_activate(
            env,
            args.name,
            args.sandbox,
            resolver=resolver,
            rubies_root=settings.rubies_root,
        )
        return format_vars(variables)
    if args.command == "deactivate":
        variables = await compute_deactivate(env, resolver=resolver)
        return format_vars(variables)

    raise UsageError(f"Unknown command: {args.command}")


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    resolver: Optional[RubyInfoResolver] = None,
) -> int:
    environ = os.environ if environ is None else environ
    # Errors from load_settings are logged at the default level
    configure_logging()

    try:
        settings = load_settings(environ)
        if settings.log_level != DEFAULT_LOG_LEVEL:
            configure_logging(settings.log_level)
        args = build_parser().parse_args(list(argv) if argv is not None else None)
        resolver = resolver or SubprocessResolver(settings.ruby_binary)
        output = asyncio.run(run_command(args, environ, settings, resolver))
    except RubiesError as e:
        log_error(e, {"argv": list(argv) if argv is not None else sys.argv[1:]}, logger)
        print(f"rubies: {e}", file=sys.stderr)
        return e.exit_code

    print(output)
    return 0
