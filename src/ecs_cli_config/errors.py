"""Errors raised while resolving configuration and parsing task parameters."""

from pathlib import Path
from typing import Self


class ConfigError(RuntimeError):
    """Configuration related errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        field: str | None = None,
    ) -> None:
        """Create a configuration error.

        Args:
            message: Human readable description of the problem.
            path: File the problem was found in, if known.
            field: Dotted name of the offending field, if known.
        """
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.field = field

    def __str__(self) -> str:
        parts = []
        if self.path:
            parts.append(self.path)
        if self.field:
            parts.append(f"field '{self.field}'")
        if not parts:
            return self.message
        return f"{': '.join(parts)}: {self.message}"

    def with_context(
        self,
        *,
        path: str | Path | None = None,
        field: str | None = None,
    ) -> Self:
        """Return a copy of this error with extra location context.

        Existing context wins over the supplied values.

        Args:
            path: File the error originated from.
            field: Field name the error relates to.

        Returns:
            A new error of the same class.
        """
        return type(self)(
            self.message,
            path=self.path or path,
            field=self.field or field,
        )


class ConfigNotFoundError(ConfigError):
    """An expected file is missing."""


class ConfigFormatError(ConfigError):
    """An expected key is absent or has the wrong shape."""


class ConfigConflictError(ConfigError):
    """Mutually exclusive fields were specified together."""


class ConfigValidationError(ConfigError):
    """A semantically required value is missing."""


class ConfigIOError(ConfigError):
    """Reading, writing or changing permissions of a file failed."""
