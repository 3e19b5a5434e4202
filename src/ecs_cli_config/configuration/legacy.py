"""Reader for the single-file INI configuration used by older releases.

Sample file::

    [ecs]
    cluster = test
    aws_profile =
    region = us-west-2
    aws_access_key_id =
    aws_secret_access_key =
    compose-project-name-prefix = ecscompose-
    compose-service-name-prefix =
    cfn-stack-name-prefix = ecs-cli-
"""

import configparser
import logging
from pathlib import Path

from ecs_cli_config.configuration.models import ConfigSource, ResolvedConfig
from ecs_cli_config.errors import ConfigFormatError, ConfigIOError, ConfigNotFoundError

logger = logging.getLogger(__name__)

ECS_SECTION = "ecs"
CLUSTER_KEY = "cluster"

# INI key -> ResolvedConfig field, for the optional keys.
_OPTIONAL_KEYS = {
    "aws_profile": "aws_profile",
    "region": "region",
    "aws_access_key_id": "aws_access_key_id",
    "aws_secret_access_key": "aws_secret_access_key",
    "compose-project-name-prefix": "compose_project_name_prefix",
    "compose-service-name-prefix": "compose_service_name_prefix",
    "cfn-stack-name-prefix": "cfn_stack_name_prefix",
}

# Empty values mean "not set" for these keys; prefixes may legitimately be "".
_BLANK_IS_UNSET = {"aws_profile", "region", "aws_access_key_id", "aws_secret_access_key"}


def read_legacy_config(path: Path) -> ResolvedConfig:
    """Read the legacy INI configuration file.

    Args:
        path: Location of the legacy file.

    Returns:
        The configuration it describes.
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with path.open(encoding="utf-8") as handle:
            parser.read_file(handle)
    except FileNotFoundError as exc:
        raise ConfigNotFoundError("Legacy configuration file not found.", path=path) from exc
    except configparser.Error as exc:
        raise ConfigFormatError(f"Invalid legacy configuration file: {exc}", path=path) from exc
    except OSError as exc:
        raise ConfigIOError(f"Unable to read legacy configuration: {exc}", path=path) from exc

    if not parser.has_section(ECS_SECTION):
        raise ConfigFormatError(
            f"Format issue with legacy config file; section [{ECS_SECTION}] not found.",
            path=path,
        )
    section = parser[ECS_SECTION]

    cluster = section.get(CLUSTER_KEY, "").strip()
    if not cluster:
        raise ConfigFormatError(
            "Format issue with legacy config file; expected key not found.",
            path=path,
            field=f"{ECS_SECTION}.{CLUSTER_KEY}",
        )

    values: dict[str, str] = {}
    for key, field_name in _OPTIONAL_KEYS.items():
        if key not in section:
            continue
        value = section[key].strip()
        if not value and key in _BLANK_IS_UNSET:
            continue
        values[field_name] = value

    logger.debug("Read legacy configuration from %s", path)
    return ResolvedConfig(source=ConfigSource.LEGACY, cluster=cluster, **values)
