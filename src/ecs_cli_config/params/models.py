"""Schema of the ECS parameter file (``ecs-params.yml``).

Sample::

    version: 1
    task_definition:
      ecs_network_mode: awsvpc
      task_role_arn: arn:aws:iam::123456789012:role/app
      task_execution_role: ecsTaskExecutionRole
      task_size:
        cpu_limit: 256
        mem_limit: 0.5GB
      services:
        web:
          essential: true
          cpu_shares: 100
          mem_limit: 512m
          healthcheck:
            test: curl -f http://localhost
            interval: 30s
    run_params:
      network_configuration:
        awsvpc_configuration:
          subnets: [subnet-1]
          security_groups: [sg-1]
          assign_public_ip: ENABLED
"""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ecs_cli_config.params.healthcheck import HealthCheck, parse_health_check
from ecs_cli_config.params.units import bytes_to_mib, parse_memory


class ParamsModel(BaseModel):
    """Base for parameter file sections; ``null`` values count as absent."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class AssignPublicIp(str, Enum):
    """Whether tasks in awsvpc mode receive a public IP."""

    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class ContainerDefinition(ParamsModel):
    """ECS container settings that a compose file cannot express."""

    essential: bool = True
    cpu_shares: int | None = None
    mem_limit: int | None = None
    mem_reservation: int | None = None
    healthcheck: HealthCheck | None = None

    @field_validator("mem_limit", "mem_reservation", mode="before")
    @classmethod
    def _parse_memory(cls, value: Any, info: ValidationInfo) -> int | None:
        return parse_memory(value, field=info.field_name)

    @field_validator("healthcheck", mode="before")
    @classmethod
    def _parse_health_check(cls, value: Any) -> HealthCheck:
        if isinstance(value, HealthCheck):
            return value
        return parse_health_check(value)

    def to_api(self) -> dict[str, Any]:
        """Return the fields as used in a container definition."""
        payload: dict[str, Any] = {"essential": self.essential}
        if self.cpu_shares is not None:
            payload["cpu"] = self.cpu_shares
        if self.mem_limit is not None:
            payload["memory"] = bytes_to_mib(self.mem_limit)
        if self.mem_reservation is not None:
            payload["memoryReservation"] = bytes_to_mib(self.mem_reservation)
        if self.healthcheck is not None:
            payload["healthCheck"] = self.healthcheck.to_api()
        return payload


class TaskSize(ParamsModel):
    """Task level CPU and memory, required for Fargate."""

    cpu_limit: str | None = None
    mem_limit: str | None = None

    @field_validator("cpu_limit", "mem_limit", mode="before")
    @classmethod
    def _as_string(cls, value: Any) -> Any:
        return _scalar_to_str(value)


class TaskDefinition(ParamsModel):
    """Task definition fields."""

    network_mode: str | None = Field(default=None, alias="ecs_network_mode")
    task_role_arn: str | None = None
    container_definitions: dict[str, ContainerDefinition] = Field(
        default_factory=dict, alias="services"
    )
    execution_role: str | None = Field(default=None, alias="task_execution_role")
    task_size: TaskSize = Field(default_factory=TaskSize)

    @field_validator("container_definitions", mode="before")
    @classmethod
    def _bare_services(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: {} if body is None else body for name, body in value.items()}
        return value


class AwsVpcConfiguration(ParamsModel):
    """Networking resources for tasks in awsvpc mode."""

    subnets: list[str] = Field(default_factory=list)
    security_groups: list[str] = Field(default_factory=list)
    assign_public_ip: AssignPublicIp | None = None

    @field_validator("assign_public_ip", mode="before")
    @classmethod
    def _normalise_assign_public_ip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


class NetworkParams(ParamsModel):
    """The ``network_configuration`` section."""

    awsvpc_configuration: AwsVpcConfiguration = Field(default_factory=AwsVpcConfiguration)


class RunParams(ParamsModel):
    """Parameters used when running tasks rather than defining them."""

    network_configuration: NetworkParams = Field(default_factory=NetworkParams)


class TaskParameterDocument(ParamsModel):
    """A parsed ``ecs-params.yml``."""

    version: str | None = None
    task_definition: TaskDefinition = Field(default_factory=TaskDefinition)
    run_params: RunParams = Field(default_factory=RunParams)

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_string(cls, value: Any) -> Any:
        return _scalar_to_str(value)
