"""Application layer - use cases, job files and heuristic selection."""

from .commands import PackCommand
from .config import ConfigError, PackingJobConfig, load_config, load_config_from_dict
from .scoring import DEFAULT_HEURISTIC, ScorerFactory

__all__ = [
    "ConfigError",
    "DEFAULT_HEURISTIC",
    "PackCommand",
    "PackingJobConfig",
    "ScorerFactory",
    "load_config",
    "load_config_from_dict",
]
