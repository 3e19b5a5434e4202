"""Profile and cluster configuration for the ECS CLI."""

from ecs_cli_config.configuration.models import (
    ClusterConfiguration,
    ClusterEntry,
    ConfigSource,
    ProfileConfiguration,
    ProfileEntry,
    ResolvedConfig,
)
from ecs_cli_config.configuration.resolver import resolve_config, select_config_source
from ecs_cli_config.configuration.store import ConfigStore

__all__ = [
    "ClusterConfiguration",
    "ClusterEntry",
    "ConfigSource",
    "ConfigStore",
    "ProfileConfiguration",
    "ProfileEntry",
    "ResolvedConfig",
    "resolve_config",
    "select_config_source",
]
