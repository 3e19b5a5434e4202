"""Resolve profile and cluster selections into one configuration."""

import logging

from ecs_cli_config.configuration.legacy import read_legacy_config
from ecs_cli_config.configuration.models import (
    ClusterDocument,
    ClusterEntry,
    ConfigSource,
    ProfileDocument,
    ProfileEntry,
    ResolvedConfig,
)
from ecs_cli_config.configuration.store import ConfigStore
from ecs_cli_config.errors import ConfigFormatError, ConfigNotFoundError

logger = logging.getLogger(__name__)

# (legacy file exists, current files exist) -> source to read.
_SOURCE_POLICY: dict[tuple[bool, bool], ConfigSource] = {
    (True, False): ConfigSource.LEGACY,
    (True, True): ConfigSource.CURRENT,
    (False, True): ConfigSource.CURRENT,
    (False, False): ConfigSource.MISSING,
}


def select_config_source(legacy_exists: bool, current_exists: bool) -> ConfigSource:
    """Decide which on-disk format a resolution reads from.

    The current format always wins when present; legacy and current data are
    never merged.

    Args:
        legacy_exists: Whether the legacy INI file exists.
        current_exists: Whether the cluster document exists.

    Returns:
        The source to read.
    """
    return _SOURCE_POLICY[(legacy_exists, current_exists)]


def resolve_config(
    cluster_name: str | None = None,
    profile_name: str | None = None,
    store: ConfigStore | None = None,
) -> ResolvedConfig:
    """Build the configuration for a cluster and profile selection.

    Empty selectors fall back to the default entry of each document.

    Args:
        cluster_name: Name of the cluster configuration to use.
        profile_name: Name of the profile to use.
        store: Store to read from. Uses the default destination when omitted.

    Returns:
        The resolved configuration.
    """
    store = store or ConfigStore()
    source = select_config_source(store.legacy_path.exists(), store.cluster_path.exists())
    logger.debug("Reading configuration from %s source", source.value)

    if source is ConfigSource.MISSING:
        raise ConfigNotFoundError(
            "No ECS CLI configuration found. Configure a cluster and a profile first.",
            path=store.destination.path,
        )

    if source is ConfigSource.LEGACY:
        if cluster_name or profile_name:
            logger.warning(
                "Legacy configuration in use; ignoring cluster/profile selection. "
                "Save a cluster and profile to switch to the new format."
            )
        return read_legacy_config(store.legacy_path)

    cluster_document = store.read_cluster_document()
    profile_document = store.read_profile_document()

    profile = resolve_profile(profile_document, profile_name, str(store.profile_path))
    cluster = resolve_cluster(cluster_document, cluster_name, str(store.cluster_path))

    return ResolvedConfig(
        source=ConfigSource.CURRENT,
        cluster=cluster.cluster,
        region=cluster.region,
        aws_access_key_id=profile.aws_access_key_id,
        aws_secret_access_key=profile.aws_secret_access_key,
        compose_project_name_prefix=cluster.compose_project_name_prefix,
        compose_service_name_prefix=cluster.compose_service_name_prefix,
        cfn_stack_name_prefix=cluster.cfn_stack_name_prefix,
    )


def resolve_profile(
    document: ProfileDocument, name: str | None, path: str | None = None
) -> ProfileEntry:
    """Return the named profile, or the default one when ``name`` is empty."""
    key = _selected_key(document.default, name, "profile", path)
    try:
        return document.ecs_profiles[key]
    except KeyError:
        raise ConfigFormatError(
            f"Format issue with profile config file; profile '{key}' not found.",
            path=path,
            field=f"ecs_profiles.{key}",
        ) from None


def resolve_cluster(
    document: ClusterDocument, name: str | None, path: str | None = None
) -> ClusterEntry:
    """Return the named cluster configuration, or the default one when ``name`` is empty."""
    key = _selected_key(document.default, name, "cluster", path)
    try:
        return document.clusters[key]
    except KeyError:
        raise ConfigFormatError(
            f"Format issue with cluster config file; cluster configuration '{key}' not found.",
            path=path,
            field=f"clusters.{key}",
        ) from None


def _selected_key(default: str | None, name: str | None, kind: str, path: str | None) -> str:
    if name:
        return name
    if not default:
        raise ConfigFormatError(
            f"Format issue with {kind} config file; no {kind} selected and no default set.",
            path=path,
            field="default",
        )
    return default
