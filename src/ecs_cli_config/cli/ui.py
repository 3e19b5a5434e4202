"""Shared Rich console for the CLI."""

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def mask_secret(value: str | None) -> str:
    """Hide all but the last four characters of a credential.

    Args:
        value: Secret to mask.

    Returns:
        The masked value, or an empty string when unset.
    """
    if not value:
        return ""
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]
