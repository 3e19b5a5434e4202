"""Persistence for the profile and cluster documents."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from ecs_cli_config.config.paths import CONFIG_FILE_MODE, Destination, default_destination
from ecs_cli_config.configuration.models import (
    ClusterConfiguration,
    ClusterDocument,
    ProfileConfiguration,
    ProfileDocument,
)
from ecs_cli_config.errors import ConfigFormatError, ConfigIOError, ConfigNotFoundError

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseModel)


class ConfigStore:
    """Reads and writes ``profile.yml`` and ``config.yml`` in a destination.

    Every write is a whole-document read-modify-write. The first entry saved
    into an empty document also becomes that document's default.
    """

    def __init__(self, destination: Destination | None = None) -> None:
        self.destination = destination or default_destination()

    @property
    def profile_path(self) -> Path:
        return self.destination.profile_config_path

    @property
    def cluster_path(self) -> Path:
        return self.destination.cluster_config_path

    @property
    def legacy_path(self) -> Path:
        return self.destination.legacy_config_path

    def read_profile_document(self, missing_ok: bool = False) -> ProfileDocument:
        """Load the profile document.

        Args:
            missing_ok: Return an empty document instead of failing when the
                file does not exist.

        Returns:
            The parsed profile document.
        """
        return _read_document(self.profile_path, ProfileDocument, "profile", missing_ok)

    def read_cluster_document(self, missing_ok: bool = False) -> ClusterDocument:
        """Load the cluster document.

        Args:
            missing_ok: Return an empty document instead of failing when the
                file does not exist.

        Returns:
            The parsed cluster document.
        """
        return _read_document(self.cluster_path, ClusterDocument, "cluster", missing_ok)

    def save_profile(self, profile: ProfileConfiguration) -> Path:
        """Add or replace a named profile.

        Args:
            profile: Profile name and credentials to store.

        Returns:
            The saved profile document path.
        """
        document = self.read_profile_document(missing_ok=True)
        if not document.ecs_profiles:
            document.default = profile.name
        document.ecs_profiles[profile.name] = profile.entry
        self._write_document(self.profile_path, document)
        logger.info("Saved ECS CLI profile configuration %s", profile.name)
        return self.profile_path

    def save_cluster(self, cluster: ClusterConfiguration) -> Path:
        """Add or replace a named cluster configuration.

        Args:
            cluster: Cluster configuration name and values to store.

        Returns:
            The saved cluster document path.
        """
        document = self.read_cluster_document(missing_ok=True)
        if not document.clusters:
            document.default = cluster.name
        document.clusters[cluster.name] = cluster.entry
        self._write_document(self.cluster_path, document)
        logger.info("Saved ECS CLI cluster configuration %s", cluster.name)
        return self.cluster_path

    def set_default_profile(self, name: str) -> Path:
        """Point the profile document's default at ``name``."""
        document = self.read_profile_document()
        if name not in document.ecs_profiles:
            logger.warning("Default profile %s is not defined in %s", name, self.profile_path)
        document.default = name
        self._write_document(self.profile_path, document)
        return self.profile_path

    def set_default_cluster(self, name: str) -> Path:
        """Point the cluster document's default at ``name``."""
        document = self.read_cluster_document()
        if name not in document.clusters:
            logger.warning(
                "Default cluster configuration %s is not defined in %s", name, self.cluster_path
            )
        document.default = name
        self._write_document(self.cluster_path, document)
        return self.cluster_path

    def _write_document(self, path: Path, document: BaseModel) -> None:
        """Replace ``path`` with the serialised document, owner-only."""
        try:
            self.destination.path.mkdir(mode=self.destination.mode, parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(
                f"Unable to create configuration directory: {exc}", path=self.destination.path
            ) from exc

        if self.legacy_path.exists():
            logger.warning(
                "Writing YAML formatted config to %s. INI formatted config still exists in %s.",
                self.destination.path,
                self.legacy_path,
            )

        # Tighten permissions before writing, the file may hold credentials.
        if path.exists():
            try:
                os.chmod(path, CONFIG_FILE_MODE)
            except OSError as exc:
                logger.error("Unable to chmod %s to mode %o", path, CONFIG_FILE_MODE)
                raise ConfigIOError(f"Unable to change permissions: {exc}", path=path) from exc

        data = document.model_dump(by_alias=True, exclude_none=True)
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.destination.path, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.chmod(tmp_name, CONFIG_FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            logger.error("Unable to write config to %s", path)
            raise ConfigIOError(f"Unable to write configuration: {exc}", path=path) from exc
        logger.debug("Wrote %s", path)


def _read_document(
    path: Path,
    model: type[DocumentT],
    kind: str,
    missing_ok: bool,
) -> DocumentT:
    """Read a YAML document and validate it against ``model``."""
    data = _read_yaml_mapping(path, kind, missing_ok)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigFormatError(
            f"Format issue with {kind} config file: {exc}", path=path
        ) from exc


def _read_yaml_mapping(path: Path, kind: str, missing_ok: bool) -> dict[Any, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        if missing_ok:
            return {}
        raise ConfigNotFoundError(f"The {kind} config file does not exist.", path=path) from exc
    except OSError as exc:
        raise ConfigIOError(f"Unable to read {kind} config file: {exc}", path=path) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigFormatError(f"Invalid {kind} config file: {exc}", path=path) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(f"The {kind} config file must contain a YAML mapping.", path=path)
    return data
