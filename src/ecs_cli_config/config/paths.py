"""Shared filesystem paths for user configuration."""

from dataclasses import dataclass
from pathlib import Path

from ecs_cli_config.config.settings import CliSettings, get_settings

CONFIG_DIR_NAME = ".ecs"
CLUSTER_CONFIG_FILENAME = "config.yml"
PROFILE_CONFIG_FILENAME = "profile.yml"
LEGACY_CONFIG_FILENAME = "config"

CONFIG_DIR_MODE = 0o755
CONFIG_FILE_MODE = 0o600


@dataclass(frozen=True)
class Destination:
    """Directory the configuration documents live in, and its creation mode."""

    path: Path
    mode: int = CONFIG_DIR_MODE

    @property
    def cluster_config_path(self) -> Path:
        return self.path / CLUSTER_CONFIG_FILENAME

    @property
    def profile_config_path(self) -> Path:
        return self.path / PROFILE_CONFIG_FILENAME

    @property
    def legacy_config_path(self) -> Path:
        return self.path / LEGACY_CONFIG_FILENAME


def config_dir(settings: CliSettings | None = None) -> Path:
    """Return the user configuration directory.

    Args:
        settings: Settings to read an override from. Loaded from the
            environment when omitted.

    Returns:
        The configured directory, or ``~/.ecs``.
    """
    settings = settings or get_settings()
    if settings.config_dir is not None:
        return settings.config_dir.expanduser()
    return Path.home() / CONFIG_DIR_NAME


def default_destination(settings: CliSettings | None = None) -> Destination:
    """Return the default configuration destination."""
    return Destination(path=config_dir(settings))
