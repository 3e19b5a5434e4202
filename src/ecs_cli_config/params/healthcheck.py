"""Container health check parsing.

Three mutually exclusive spellings are accepted for the command:

* ``command: [CMD, curl, -f, http://localhost]``
* ``test: [CMD, curl, -f, http://localhost]`` (docker compose)
* ``test: curl -f http://localhost`` (run through the container's shell)

All of them end up in the same :class:`HealthCheck`.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ecs_cli_config.errors import ConfigConflictError, ConfigFormatError
from ecs_cli_config.params.units import parse_time_field

DEFAULT_RETRIES = 3
SHELL_COMMAND = "CMD-SHELL"

_TIME_FIELDS = ("interval", "timeout", "start_period")


class CommandShape(str, Enum):
    """How the health check command was written."""

    SEQUENCE = "sequence"
    SHELL_STRING = "shell_string"


class HealthCheck(BaseModel):
    """Canonical container health check."""

    model_config = ConfigDict(frozen=True)

    command: list[str] = Field(default_factory=list)
    interval: int | None = None
    timeout: int | None = None
    retries: int = DEFAULT_RETRIES
    start_period: int | None = None

    def to_api(self) -> dict[str, Any]:
        """Return the health check as expected by RegisterTaskDefinition."""
        payload: dict[str, Any] = {"command": list(self.command), "retries": self.retries}
        if self.interval is not None:
            payload["interval"] = self.interval
        if self.timeout is not None:
            payload["timeout"] = self.timeout
        if self.start_period is not None:
            payload["startPeriod"] = self.start_period
        return payload


def parse_health_check(node: object) -> HealthCheck:
    """Normalise a ``healthcheck`` mapping from the task parameter document.

    Args:
        node: The raw YAML value of the ``healthcheck`` key.

    Returns:
        The canonical health check.

    Raises:
        ConfigConflictError: If both ``command`` and ``test`` are given.
        ConfigFormatError: If a field has the wrong shape.
    """
    if not isinstance(node, Mapping):
        raise ConfigFormatError("healthcheck must be a mapping", field="healthcheck")

    variants = [
        variant
        for variant in (
            _command_variant(node.get("command"), "command"),
            _command_variant(node.get("test"), "test"),
        )
        if variant is not None
    ]
    if len(variants) > 1:
        raise ConfigConflictError(
            "healthcheck.test and healthcheck.command can not both be specified",
            field="healthcheck",
        )

    command: list[str] = []
    if variants:
        shape, values = variants[0]
        command = [SHELL_COMMAND, values[0]] if shape is CommandShape.SHELL_STRING else values

    times = {
        name: parse_time_field(node.get(name), field=f"healthcheck.{name}")
        for name in _TIME_FIELDS
    }
    return HealthCheck(command=command, retries=_parse_retries(node.get("retries")), **times)


def _command_variant(value: object, name: str) -> tuple[CommandShape, list[str]] | None:
    """Classify one command field, or return None when it is unset or empty."""
    if value is None:
        return None
    if isinstance(value, str):
        if not value:
            return None
        return CommandShape.SHELL_STRING, [value]
    if isinstance(value, list):
        if not value:
            return None
        return CommandShape.SEQUENCE, [_command_part(part, name) for part in value]
    raise ConfigFormatError(
        "must be a string or a list of strings", field=f"healthcheck.{name}"
    )


def _command_part(part: object, name: str) -> str:
    if isinstance(part, bool) or not isinstance(part, (str, int, float)):
        raise ConfigFormatError(
            f"command arguments must be strings, got {part!r}", field=f"healthcheck.{name}"
        )
    return str(part)


def _parse_retries(value: object) -> int:
    if value is None:
        return DEFAULT_RETRIES
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigFormatError(
            f"retries must be a non-negative integer, got {value!r}", field="healthcheck.retries"
        )
    return value or DEFAULT_RETRIES
