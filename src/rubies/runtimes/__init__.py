"""Ruby runtime introspection."""

from rubies.runtimes.info import (
    RubyInfoResolver,
    SubprocessResolver,
    query_ruby_info,
)

__all__ = ["RubyInfoResolver", "SubprocessResolver", "query_ruby_info"]
