"""AWS session helpers."""

import boto3

from ecs_cli_config.configuration.models import ResolvedConfig


def create_session(config: ResolvedConfig) -> boto3.session.Session:
    """Create a boto3 session for a resolved configuration."""
    if config.aws_profile:
        return boto3.session.Session(
            profile_name=config.aws_profile,
            region_name=config.region,
        )
    if config.aws_access_key_id and config.aws_secret_access_key:
        return boto3.session.Session(
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            region_name=config.region,
        )
    return boto3.session.Session(region_name=config.region)
