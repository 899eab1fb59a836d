"""Job file configuration: schema, loader and domain adapter."""

from maxrects.application.config.adapter import config_to_bins, config_to_boxes
from maxrects.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from maxrects.application.config.schema import (
    SUPPORTED_VERSIONS,
    BinConfig,
    BoxConfig,
    PackingJobConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BinConfig",
    "BoxConfig",
    "ConfigError",
    "PackingJobConfig",
    "config_to_bins",
    "config_to_boxes",
    "load_config",
    "load_config_from_dict",
]
