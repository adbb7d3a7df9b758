"""Environment snapshots and activation transitions."""

from rubies.environments.activation import compute_activate, compute_deactivate
from rubies.environments.environment import read_environment

__all__ = ["compute_activate", "compute_deactivate", "read_environment"]
