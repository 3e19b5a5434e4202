"""Runtime settings for the ECS CLI configuration layer."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PARAMS_FILENAME = "ecs-params.yml"


class CliSettings(BaseSettings):
    """Settings read from ``ECS_CLI_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="ECS_CLI_", extra="ignore")

    config_dir: Path | None = Field(
        default=None, description="Directory holding profile.yml and config.yml"
    )
    params_file: str = Field(
        default=DEFAULT_PARAMS_FILENAME,
        description="Task parameter file looked up in the working directory",
    )


def get_settings() -> CliSettings:
    """Load and return the CLI settings."""
    return CliSettings()
