"""Tests for the command line interface."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from ecs_cli_config.cli.main import cli
from ecs_cli_config.cli.ui import mask_secret


@pytest.fixture
def config_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "ecs"
    monkeypatch.setenv("ECS_CLI_CONFIG_DIR", str(path))
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _configure(runner: CliRunner) -> None:
    result = runner.invoke(
        cli,
        ["configure", "cluster", "--config-name", "dev", "--cluster", "dev-cluster",
         "--region", "us-west-2"],
    )
    assert result.exit_code == 0, result.output
    result = runner.invoke(
        cli,
        ["configure", "profile", "--profile-name", "dev", "--access-key", "AKIAEXAMPLE1234",
         "--secret-key", "supersecretvalue"],
    )
    assert result.exit_code == 0, result.output


def test_configure_writes_documents(runner: CliRunner, config_dir: Path) -> None:
    _configure(runner)

    clusters = yaml.safe_load((config_dir / "config.yml").read_text(encoding="utf-8"))
    profiles = yaml.safe_load((config_dir / "profile.yml").read_text(encoding="utf-8"))
    assert clusters["default"] == "dev"
    assert clusters["clusters"]["dev"] == {"cluster": "dev-cluster", "region": "us-west-2"}
    assert profiles["ecs_profiles"]["dev"]["aws_access_key_id"] == "AKIAEXAMPLE1234"


def test_show_masks_credentials(runner: CliRunner, config_dir: Path) -> None:
    _configure(runner)

    result = runner.invoke(cli, ["show"])

    assert result.exit_code == 0, result.output
    assert "dev-cluster" in result.output
    assert "1234" in result.output
    assert "AKIAEXAMPLE1234" not in result.output
    assert "supersecretvalue" not in result.output


def test_set_defaults(runner: CliRunner, config_dir: Path) -> None:
    _configure(runner)
    runner.invoke(
        cli,
        ["configure", "cluster", "--config-name", "prod", "--cluster", "prod-cluster",
         "--region", "eu-west-1"],
    )

    result = runner.invoke(cli, ["configure", "cluster-default", "--config-name", "prod"])

    assert result.exit_code == 0, result.output
    clusters = yaml.safe_load((config_dir / "config.yml").read_text(encoding="utf-8"))
    assert clusters["default"] == "prod"


def test_show_without_configuration_fails(runner: CliRunner, config_dir: Path) -> None:
    result = runner.invoke(cli, ["show"])

    assert result.exit_code == 1


def test_params_prints_network_configuration(
    runner: CliRunner, config_dir: Path, tmp_path: Path, write_file
) -> None:
    path = write_file(
        tmp_path / "ecs-params.yml",
        "version: 1\n"
        "task_definition:\n"
        "  ecs_network_mode: awsvpc\n"
        "run_params:\n"
        "  network_configuration:\n"
        "    awsvpc_configuration:\n"
        "      subnets: [subnet-1]\n"
        "      security_groups: [sg-1, sg-2]\n",
    )

    result = runner.invoke(cli, ["params", "--ecs-params", str(path)])

    assert result.exit_code == 0, result.output
    assert "subnet-1" in result.output
    assert "sg-2" in result.output


def test_params_validation_error_exits_non_zero(
    runner: CliRunner, config_dir: Path, tmp_path: Path, write_file
) -> None:
    path = write_file(tmp_path / "ecs-params.yml", "task_definition:\n  ecs_network_mode: awsvpc\n")

    result = runner.invoke(cli, ["params", "--ecs-params", str(path)])

    assert result.exit_code == 1


def test_configure_profile_rejects_empty_name(runner: CliRunner, config_dir: Path) -> None:
    result = runner.invoke(
        cli,
        ["configure", "profile", "--profile-name", "", "--access-key", "AKIAEXAMPLE",
         "--secret-key", "s"],
    )

    assert result.exit_code == 1
    assert "Invalid profile configuration" in result.output
    assert not (config_dir / "profile.yml").exists()


def test_configure_cluster_rejects_empty_name(runner: CliRunner, config_dir: Path) -> None:
    result = runner.invoke(
        cli,
        ["configure", "cluster", "--config-name", "", "--cluster", "c", "--region", "us-west-2"],
    )

    assert result.exit_code == 1
    assert "Invalid cluster configuration" in result.output


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, ""), ("", ""), ("abc", "***"), ("AKIAEXAMPLE1234", "***********1234")],
)
def test_mask_secret(value: str | None, expected: str) -> None:
    assert mask_secret(value) == expected
