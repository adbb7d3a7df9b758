"""Switch between installed rubies from the shell."""

from rubies.types import ActivationEnvironment, RubyInfo, Settings, VariableMapping
from rubies.paths import remove_from_path
from rubies.runtimes.info import RubyInfoResolver, SubprocessResolver
from rubies.environments import compute_activate, compute_deactivate, read_environment
from rubies.shell import format_vars
from rubies.errors import RubiesError, ResolutionError, UsageError

__version__ = "0.1.0"

__all__ = [
    # Types
    "ActivationEnvironment",
    "RubyInfo",
    "Settings",
    "VariableMapping",

    # Transitions
    "compute_activate",
    "compute_deactivate",
    "read_environment",
    "remove_from_path",
    "format_vars",

    # Ruby introspection
    "RubyInfoResolver",
    "SubprocessResolver",

    # Error types
    "RubiesError",
    "ResolutionError",
    "UsageError",
]
