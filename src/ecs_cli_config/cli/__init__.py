"""Command line interface for ECS CLI configuration."""
