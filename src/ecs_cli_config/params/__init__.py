"""Parsing of the ECS parameter file."""

from ecs_cli_config.params.healthcheck import HealthCheck, parse_health_check
from ecs_cli_config.params.models import (
    AssignPublicIp,
    ContainerDefinition,
    TaskDefinition,
    TaskParameterDocument,
)
from ecs_cli_config.params.network import NetworkConfiguration, extract_network_configuration
from ecs_cli_config.params.reader import expand_env, load_task_parameters, parse_task_parameters

__all__ = [
    "AssignPublicIp",
    "ContainerDefinition",
    "HealthCheck",
    "NetworkConfiguration",
    "TaskDefinition",
    "TaskParameterDocument",
    "expand_env",
    "extract_network_configuration",
    "load_task_parameters",
    "parse_health_check",
    "parse_task_parameters",
]
