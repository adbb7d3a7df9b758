"""Core type definitions"""

from dataclasses import dataclass
from typing import Dict, Optional

PATH_VAR = "PATH"
GEM_HOME_VAR = "GEM_HOME"
GEM_PATH_VAR = "GEM_PATH"
ACTIVATED_RUBY_BIN_VAR = "RUBIES_ACTIVATED_RUBY_BIN_PATH"
ACTIVATED_SANDBOX_BIN_VAR = "RUBIES_ACTIVATED_SANDBOX_BIN_PATH"

MANAGED_VARIABLES = frozenset(
    {
        PATH_VAR,
        GEM_HOME_VAR,
        GEM_PATH_VAR,
        ACTIVATED_RUBY_BIN_VAR,
        ACTIVATED_SANDBOX_BIN_VAR,
    }
)

# None means the variable is to be unset
VariableMapping = Dict[str, Optional[str]]


@dataclass(frozen=True)
class RubyInfo:
    """Engine, version and gem search path reported by a ruby"""
    engine: str
    version: str
    gem_path: str


@dataclass(frozen=True)
class ActivationEnvironment:
    """Snapshot of the variables an activation reads and writes"""
    search_path: str
    gem_home: Optional[str] = None
    gem_path: Optional[str] = None
    activated_ruby_bin: Optional[str] = None
    activated_sandbox_bin: Optional[str] = None

    @property
    def activated_bins(self) -> tuple[Optional[str], Optional[str]]:
        return (self.activated_ruby_bin, self.activated_sandbox_bin)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration"""
    rubies_root: str
    ruby_binary: str = "ruby"
    log_level: str = "WARNING"
