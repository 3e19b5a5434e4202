"""Loading of the ECS parameter file."""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from ecs_cli_config.config.settings import CliSettings, get_settings
from ecs_cli_config.errors import (
    ConfigError,
    ConfigFormatError,
    ConfigIOError,
    ConfigNotFoundError,
)
from ecs_cli_config.params.models import TaskParameterDocument

logger = logging.getLogger(__name__)

_ENV_REFERENCE_RE = re.compile(r"\$\{([^}]*)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def expand_env(text: str, environ: Mapping[str, str]) -> str:
    """Replace ``${NAME}`` and ``$NAME`` references with values from ``environ``.

    Unset names expand to an empty string, as in a shell.

    Args:
        text: Raw text to expand.
        environ: Environment snapshot to read values from.

    Returns:
        The expanded text.
    """

    def _replace(match: re.Match[str]) -> str:
        braced, bare = match.groups()
        name = braced if braced is not None else bare
        return environ.get(name, "")

    return _ENV_REFERENCE_RE.sub(_replace, text)


def parse_task_parameters(
    text: str,
    environ: Mapping[str, str] | None = None,
) -> TaskParameterDocument:
    """Expand environment references in ``text`` and parse it.

    Args:
        text: Contents of a parameter file.
        environ: Environment snapshot. Defaults to the process environment.

    Returns:
        The parsed task parameters.
    """
    expanded = expand_env(text, os.environ if environ is None else environ)
    try:
        data = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigFormatError(
            f"Error unmarshalling yaml data from ECS params file: {exc}"
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFormatError("ECS params file must contain a YAML mapping.")

    try:
        return TaskParameterDocument.model_validate(data)
    except ValidationError as exc:
        raise ConfigFormatError(f"Invalid ECS params: {exc}") from exc


def load_task_parameters(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    settings: CliSettings | None = None,
    cwd: Path | None = None,
) -> TaskParameterDocument | None:
    """Read and parse an ECS parameter file.

    Without ``path`` the default file in the working directory is used, and a
    missing default file means there are no extra parameters.

    Args:
        path: Explicit parameter file.
        environ: Environment snapshot used for ``$VAR`` expansion.
        settings: Settings naming the default file.
        cwd: Directory to look for the default file in.

    Returns:
        The parsed task parameters, or None when no file is present.
    """
    if not path:
        settings = settings or get_settings()
        default_path = (cwd or Path.cwd()) / settings.params_file
        if not default_path.is_file():
            logger.debug("No ECS params file found at %s", default_path)
            return None
        path = default_path
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError("Error reading file: file does not exist", path=path) from exc
    except OSError as exc:
        raise ConfigIOError(f"Error reading file: {exc}", path=path) from exc

    try:
        params = parse_task_parameters(text, environ)
    except ConfigError as exc:
        raise exc.with_context(path=path) from exc

    logger.debug("Loaded ECS params from %s", path)
    return params
