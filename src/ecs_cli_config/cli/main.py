"""CLI entrypoint for ECS CLI configuration."""

import json
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from ecs_cli_config.cli.ui import console, error_console, mask_secret
from ecs_cli_config.configuration import (
    ClusterConfiguration,
    ClusterEntry,
    ConfigStore,
    ProfileConfiguration,
    ProfileEntry,
    resolve_config,
)
from ecs_cli_config.errors import ConfigError, ConfigFormatError
from ecs_cli_config.params import extract_network_configuration, load_task_parameters

F = TypeVar("F", bound=Callable[..., Any])


def report_config_errors(func: F) -> F:
    """Render configuration errors and exit with status 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigError as exc:
            error_console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc

    return wrapper  # type: ignore[return-value]


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Manage ECS CLI profiles, clusters and task parameters.

    Args:
        verbose: Whether to log at debug level.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@cli.group()
def configure() -> None:
    """Store cluster and profile configurations."""


@configure.command("profile")
@click.option("--profile-name", required=True, help="Name of the profile to store.")
@click.option("--access-key", required=True, help="AWS access key ID.")
@click.option("--secret-key", required=True, help="AWS secret access key.")
@report_config_errors
def configure_profile(profile_name: str, access_key: str, secret_key: str) -> None:
    """Save a named set of AWS credentials."""
    try:
        profile = ProfileConfiguration(
            name=profile_name,
            entry=ProfileEntry(aws_access_key_id=access_key, aws_secret_access_key=secret_key),
        )
    except ValidationError as exc:
        raise ConfigFormatError(f"Invalid profile configuration: {exc}") from exc
    path = ConfigStore().save_profile(profile)
    console.print(f"[green]Saved profile {profile_name} to {path}[/green]")


@configure.command("cluster")
@click.option("--config-name", required=True, help="Name of the cluster configuration.")
@click.option("--cluster", "cluster_name", required=True, help="ECS cluster name.")
@click.option("--region", required=True, help="AWS region of the cluster.")
@click.option("--compose-project-name-prefix", default=None)
@click.option("--compose-service-name-prefix", default=None)
@click.option("--cfn-stack-name-prefix", default=None)
@report_config_errors
def configure_cluster(
    config_name: str,
    cluster_name: str,
    region: str,
    compose_project_name_prefix: str | None,
    compose_service_name_prefix: str | None,
    cfn_stack_name_prefix: str | None,
) -> None:
    """Save a named cluster configuration."""
    try:
        cluster = ClusterConfiguration(
            name=config_name,
            entry=ClusterEntry(
                cluster=cluster_name,
                region=region,
                compose_project_name_prefix=compose_project_name_prefix,
                compose_service_name_prefix=compose_service_name_prefix,
                cfn_stack_name_prefix=cfn_stack_name_prefix,
            ),
        )
    except ValidationError as exc:
        raise ConfigFormatError(f"Invalid cluster configuration: {exc}") from exc
    path = ConfigStore().save_cluster(cluster)
    console.print(f"[green]Saved cluster configuration {config_name} to {path}[/green]")


@configure.command("profile-default")
@click.option("--profile-name", required=True, help="Profile to use by default.")
@report_config_errors
def configure_profile_default(profile_name: str) -> None:
    """Set the default profile."""
    ConfigStore().set_default_profile(profile_name)
    console.print(f"[green]Default profile set to {profile_name}[/green]")


@configure.command("cluster-default")
@click.option("--config-name", required=True, help="Cluster configuration to use by default.")
@report_config_errors
def configure_cluster_default(config_name: str) -> None:
    """Set the default cluster configuration."""
    ConfigStore().set_default_cluster(config_name)
    console.print(f"[green]Default cluster configuration set to {config_name}[/green]")


@cli.command("show")
@click.option("--cluster-config", default=None, help="Cluster configuration to resolve.")
@click.option("--ecs-profile", default=None, help="Profile to resolve.")
@report_config_errors
def show(cluster_config: str | None, ecs_profile: str | None) -> None:
    """Print the resolved configuration with credentials masked."""
    config = resolve_config(cluster_name=cluster_config, profile_name=ecs_profile)

    table = Table(title="ECS CLI configuration", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("source", config.source.value)
    table.add_row("cluster", config.cluster)
    table.add_row("region", config.region or "")
    table.add_row("aws_profile", config.aws_profile or "")
    table.add_row("aws_access_key_id", mask_secret(config.aws_access_key_id))
    table.add_row("aws_secret_access_key", mask_secret(config.aws_secret_access_key))
    table.add_row("compose-project-name-prefix", config.effective_compose_project_name_prefix)
    table.add_row("compose-service-name-prefix", config.effective_compose_service_name_prefix)
    table.add_row("cfn-stack-name-prefix", config.effective_cfn_stack_name_prefix)
    console.print(table)


@cli.command("params")
@click.option("--ecs-params", "params_path", default=None, help="ECS params file to read.")
@report_config_errors
def params(params_path: str | None) -> None:
    """Print the normalised ECS parameters as JSON."""
    document = load_task_parameters(params_path)
    if document is None:
        console.print("[yellow]No ECS params file found.[/yellow]")
        return

    network = extract_network_configuration(document)
    task_definition = document.task_definition
    payload = {
        "version": document.version,
        "networkMode": task_definition.network_mode,
        "taskRoleArn": task_definition.task_role_arn,
        "executionRoleArn": task_definition.execution_role,
        "cpu": task_definition.task_size.cpu_limit,
        "memory": task_definition.task_size.mem_limit,
        "containerDefinitions": {
            name: container.to_api()
            for name, container in task_definition.container_definitions.items()
        },
        "networkConfiguration": network.to_api() if network else None,
    }
    console.print_json(json.dumps(payload))


def main() -> None:
    """Run the CLI."""
    cli()
