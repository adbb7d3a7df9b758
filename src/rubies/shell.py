"""Render variable mappings as shell code for ``eval``."""
import re

from rubies.types import RubyInfo, VariableMapping

_DOUBLE_QUOTE_SPECIALS = re.compile(r'([\\"$`])')


def quote_value(value: str) -> str:
    """Escape ``value`` for use inside double quotes."""
    return _DOUBLE_QUOTE_SPECIALS.sub(r"\\\1", value)


def format_vars(variables: VariableMapping) -> str:
    """One ``export``/``unset`` line per variable, sorted by name."""
    lines = []
    for name, value in sorted(variables.items()):
        if value is None:
            lines.append(f"unset {name}")
        else:
            lines.append(f'export {name}="{quote_value(value)}"')
    return "\n".join(lines)


def format_ruby_info(info: RubyInfo) -> str:
    return "\n".join([info.engine, info.version, info.gem_path])
