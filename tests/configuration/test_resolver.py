"""Tests for resolving a cluster and profile selection."""

import pytest

from ecs_cli_config.configuration.models import (
    ClusterConfiguration,
    ClusterEntry,
    ConfigSource,
    ProfileConfiguration,
    ProfileEntry,
)
from ecs_cli_config.configuration.resolver import resolve_config, select_config_source
from ecs_cli_config.configuration.store import ConfigStore
from ecs_cli_config.errors import ConfigFormatError, ConfigNotFoundError

PROFILE_YAML = """\
default: dev
ecs_profiles:
  dev:
    aws_access_key_id: AKIADEV
    aws_secret_access_key: dev-secret
  prod:
    aws_access_key_id: AKIAPROD
    aws_secret_access_key: prod-secret
"""

CLUSTER_YAML = """\
default: dev
clusters:
  dev:
    cluster: dev-cluster
    region: us-west-2
  prod:
    cluster: prod-cluster
    region: eu-west-1
    compose-project-name-prefix: proj-
    compose-service-name-prefix: svc-
    cfn-stack-name-prefix: stack-
"""


@pytest.fixture
def configured_store(store: ConfigStore, write_file) -> ConfigStore:
    write_file(store.profile_path, PROFILE_YAML)
    write_file(store.cluster_path, CLUSTER_YAML)
    return store


@pytest.mark.parametrize(
    ("legacy_exists", "current_exists", "expected"),
    [
        (True, False, ConfigSource.LEGACY),
        (True, True, ConfigSource.CURRENT),
        (False, True, ConfigSource.CURRENT),
        (False, False, ConfigSource.MISSING),
    ],
)
def test_select_config_source(
    legacy_exists: bool, current_exists: bool, expected: ConfigSource
) -> None:
    assert select_config_source(legacy_exists, current_exists) is expected


def test_empty_selectors_use_defaults(configured_store: ConfigStore) -> None:
    config = resolve_config(store=configured_store)

    assert config.source is ConfigSource.CURRENT
    assert config.cluster == "dev-cluster"
    assert config.region == "us-west-2"
    assert config.aws_access_key_id == "AKIADEV"
    assert config.aws_secret_access_key == "dev-secret"


def test_empty_selectors_match_explicit_default_names(configured_store: ConfigStore) -> None:
    implicit = resolve_config(store=configured_store)
    explicit = resolve_config(cluster_name="dev", profile_name="dev", store=configured_store)

    assert implicit == explicit


def test_explicit_selectors(configured_store: ConfigStore) -> None:
    config = resolve_config(cluster_name="prod", profile_name="prod", store=configured_store)

    assert config.cluster == "prod-cluster"
    assert config.region == "eu-west-1"
    assert config.aws_access_key_id == "AKIAPROD"
    assert config.compose_project_name_prefix == "proj-"
    assert config.compose_service_name_prefix == "svc-"
    assert config.cfn_stack_name_prefix == "stack-"


def test_absent_prefixes_stay_unset(configured_store: ConfigStore) -> None:
    config = resolve_config(store=configured_store)

    assert config.compose_project_name_prefix is None
    assert config.compose_service_name_prefix is None
    assert config.cfn_stack_name_prefix is None
    assert config.effective_compose_project_name_prefix == "ecscompose-"
    assert config.effective_compose_service_name_prefix == "ecscompose-service-"
    assert config.effective_cfn_stack_name_prefix == "amazon-ecs-cli-setup-"


def test_first_saved_entries_resolve_with_empty_selectors(store: ConfigStore) -> None:
    store.save_profile(
        ProfileConfiguration(
            name="only",
            entry=ProfileEntry(aws_access_key_id="AKIAONLY", aws_secret_access_key="s"),
        )
    )
    store.save_cluster(
        ClusterConfiguration(name="only", entry=ClusterEntry(cluster="c", region="us-east-1"))
    )

    config = resolve_config(store=store)

    assert config.aws_access_key_id == "AKIAONLY"
    assert config.cluster == "c"


def test_unknown_profile_is_a_format_error(configured_store: ConfigStore) -> None:
    with pytest.raises(ConfigFormatError) as excinfo:
        resolve_config(profile_name="staging", store=configured_store)

    assert excinfo.value.field == "ecs_profiles.staging"


def test_unknown_cluster_is_a_format_error(configured_store: ConfigStore) -> None:
    with pytest.raises(ConfigFormatError):
        resolve_config(cluster_name="staging", store=configured_store)


def test_missing_default_is_a_format_error(store: ConfigStore, write_file) -> None:
    write_file(store.profile_path, PROFILE_YAML.replace("default: dev\n", ""))
    write_file(store.cluster_path, CLUSTER_YAML)

    with pytest.raises(ConfigFormatError) as excinfo:
        resolve_config(store=store)

    assert excinfo.value.field == "default"


def test_document_without_entries_fails(store: ConfigStore, write_file) -> None:
    write_file(store.profile_path, "ecs_profiles: {}\n")
    write_file(store.cluster_path, CLUSTER_YAML)

    with pytest.raises(ConfigFormatError):
        resolve_config(store=store)


def test_non_string_default_is_a_format_error(store: ConfigStore, write_file) -> None:
    write_file(store.profile_path, PROFILE_YAML.replace("default: dev", "default: [dev]"))
    write_file(store.cluster_path, CLUSTER_YAML)

    with pytest.raises(ConfigFormatError):
        resolve_config(store=store)


def test_malformed_entry_is_a_format_error(store: ConfigStore, write_file) -> None:
    write_file(store.profile_path, PROFILE_YAML)
    write_file(store.cluster_path, "default: dev\nclusters:\n  dev:\n    cluster: dev-cluster\n")

    with pytest.raises(ConfigFormatError):
        resolve_config(store=store)


def test_missing_profile_document_is_not_found(store: ConfigStore, write_file) -> None:
    write_file(store.cluster_path, CLUSTER_YAML)

    with pytest.raises(ConfigNotFoundError):
        resolve_config(store=store)


def test_no_configuration_at_all_is_not_found(store: ConfigStore) -> None:
    with pytest.raises(ConfigNotFoundError):
        resolve_config(store=store)


def test_legacy_file_is_used_when_no_yaml_exists(store: ConfigStore, write_file) -> None:
    write_file(
        store.legacy_path,
        "[ecs]\ncluster = legacy-cluster\nregion = us-east-2\n"
        "aws_access_key_id = AKIALEGACY\naws_secret_access_key = legacy-secret\n",
    )

    config = resolve_config(cluster_name="ignored", store=store)

    assert config.source is ConfigSource.LEGACY
    assert config.cluster == "legacy-cluster"
    assert config.aws_access_key_id == "AKIALEGACY"


def test_yaml_wins_over_legacy_file(configured_store: ConfigStore, write_file) -> None:
    write_file(configured_store.legacy_path, "[ecs]\ncluster = legacy-cluster\n")

    config = resolve_config(store=configured_store)

    assert config.source is ConfigSource.CURRENT
    assert config.cluster == "dev-cluster"


def test_legacy_file_is_used_until_cluster_document_exists(
    store: ConfigStore, write_file
) -> None:
    write_file(store.legacy_path, "[ecs]\ncluster = legacy-cluster\nregion = us-east-2\n")
    store.save_profile(
        ProfileConfiguration(
            name="dev",
            entry=ProfileEntry(aws_access_key_id="AKIADEV", aws_secret_access_key="s"),
        )
    )

    config = resolve_config(store=store)

    assert config.source is ConfigSource.LEGACY
    assert config.cluster == "legacy-cluster"


def test_profile_document_alone_is_not_a_configuration(store: ConfigStore, write_file) -> None:
    write_file(store.profile_path, PROFILE_YAML)

    with pytest.raises(ConfigNotFoundError):
        resolve_config(store=store)
