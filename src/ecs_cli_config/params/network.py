"""Network configuration derived from the task parameter document."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from ecs_cli_config.errors import ConfigValidationError
from ecs_cli_config.params.models import AssignPublicIp, TaskParameterDocument

logger = logging.getLogger(__name__)

AWSVPC_NETWORK_MODE = "awsvpc"


class NetworkConfiguration(BaseModel):
    """Network configuration passed to RunTask and CreateService."""

    model_config = ConfigDict(frozen=True)

    subnets: list[str]
    security_groups: list[str]
    assign_public_ip: AssignPublicIp | None = None

    def to_api(self) -> dict[str, Any]:
        awsvpc: dict[str, Any] = {
            "subnets": list(self.subnets),
            "securityGroups": list(self.security_groups),
        }
        # EC2 launch type rejects assignPublicIp, so only send it when set.
        if self.assign_public_ip is not None:
            awsvpc["assignPublicIp"] = self.assign_public_ip.value
        return {"awsvpcConfiguration": awsvpc}


def extract_network_configuration(
    params: TaskParameterDocument | None,
) -> NetworkConfiguration | None:
    """Extract the awsvpc network configuration from task parameters.

    Args:
        params: Parsed task parameters, if any.

    Returns:
        The network configuration, or None when the network mode is not awsvpc.

    Raises:
        ConfigValidationError: If awsvpc mode is set without any subnet.
    """
    if params is None:
        return None
    if params.task_definition.network_mode != AWSVPC_NETWORK_MODE:
        return None

    awsvpc = params.run_params.network_configuration.awsvpc_configuration
    if not awsvpc.subnets:
        raise ConfigValidationError(
            "at least one subnet is required in the network configuration",
            field="run_params.network_configuration.awsvpc_configuration.subnets",
        )

    logger.debug(
        "Using awsvpc network configuration with %d subnet(s) and %d security group(s)",
        len(awsvpc.subnets),
        len(awsvpc.security_groups),
    )
    return NetworkConfiguration(
        subnets=list(awsvpc.subnets),
        security_groups=list(awsvpc.security_groups),
        assign_public_ip=awsvpc.assign_public_ip,
    )
