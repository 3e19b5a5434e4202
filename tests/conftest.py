"""Shared fixtures for the test suite."""

from pathlib import Path

import pytest

from ecs_cli_config.config.paths import Destination
from ecs_cli_config.configuration.store import ConfigStore


@pytest.fixture
def destination(tmp_path: Path) -> Destination:
    """A configuration destination inside a fresh temporary directory."""
    return Destination(path=tmp_path / ".ecs")


@pytest.fixture
def store(destination: Destination) -> ConfigStore:
    """A store writing to the temporary destination."""
    return ConfigStore(destination)


@pytest.fixture
def write_file():
    """Write text to a path, creating parent directories."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
