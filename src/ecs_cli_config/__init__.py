"""Configuration resolution and task parameter parsing for the ECS CLI."""

from ecs_cli_config.configuration import ConfigStore, ResolvedConfig, resolve_config
from ecs_cli_config.errors import (
    ConfigConflictError,
    ConfigError,
    ConfigFormatError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
)
from ecs_cli_config.params import (
    TaskParameterDocument,
    extract_network_configuration,
    load_task_parameters,
)

__all__ = [
    "ConfigConflictError",
    "ConfigError",
    "ConfigFormatError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigStore",
    "ConfigValidationError",
    "ResolvedConfig",
    "TaskParameterDocument",
    "extract_network_configuration",
    "load_task_parameters",
    "resolve_config",
]
