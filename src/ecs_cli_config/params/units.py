"""Parsers for time and memory values in the task parameter document."""

import re
from decimal import Decimal

from ecs_cli_config.errors import ConfigFormatError

_NANOSECONDS = {
    "ns": 1,
    "us": 10**3,
    "µs": 10**3,
    "μs": 10**3,
    "ms": 10**6,
    "s": 10**9,
    "m": 60 * 10**9,
    "h": 3600 * 10**9,
}

_DURATION_PART = r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"^([-+]?)((?:{_DURATION_PART})+)$")
_DURATION_PART_RE = re.compile(_DURATION_PART)
_INTEGER_RE = re.compile(r"^[-+]?\d+$")

_MEMORY_RE = re.compile(r"^(\d+(?:\.\d+)*) ?([kKmMgGtTpP])?[iI]?[bB]?$")
_MEMORY_UNITS = {
    "": 1,
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
    "p": 1024**5,
}
MIB = 1024**2


def parse_duration(text: str) -> int:
    """Parse a duration such as ``1m30s`` or ``500ms`` into whole seconds.

    Fractions of a second are truncated.

    Args:
        text: Duration string with a unit on every component.

    Returns:
        Number of seconds.

    Raises:
        ValueError: If ``text`` is not a duration.
    """
    if text in {"0", "+0", "-0"}:
        return 0
    match = _DURATION_RE.match(text)
    if match is None:
        raise ValueError(f"invalid duration {text!r}")
    sign, body = match.group(1), match.group(2)

    nanoseconds = Decimal(0)
    for number, unit in _DURATION_PART_RE.findall(body):
        nanoseconds += Decimal(number) * _NANOSECONDS[unit]

    seconds = int(nanoseconds / Decimal(10**9))
    return -seconds if sign == "-" else seconds


def parse_time_field(value: object, field: str | None = None) -> int | None:
    """Parse a time field given as an integer of seconds or as a duration.

    Args:
        value: Raw YAML value.
        field: Field name used in error messages.

    Returns:
        Number of seconds, or ``None`` when the field is unset.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigFormatError(f"Expected seconds or a duration, got {value!r}", field=field)
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ConfigFormatError(f"Expected seconds or a duration, got {value!r}", field=field)

    text = value.strip()
    if not text:
        return None
    try:
        return parse_duration(text)
    except ValueError:
        pass
    if _INTEGER_RE.match(text):
        return int(text)
    raise ConfigFormatError(
        f"Could not parse {value} either as an integer or a duration (ex: 1m30s)",
        field=field,
    )


def parse_memory(value: object, field: str | None = None) -> int | None:
    """Parse a memory size into bytes.

    Accepts an integer number of bytes or a string such as ``512m``,
    ``1.5GB`` or ``1024``. Units are binary multiples.

    Args:
        value: Raw YAML value.
        field: Field name used in error messages.

    Returns:
        Number of bytes, or ``None`` when the field is unset.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigFormatError(f"Invalid memory size {value!r}", field=field)
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ConfigFormatError(f"Invalid memory size {value!r}", field=field)

    text = value.strip()
    if not text:
        return None
    match = _MEMORY_RE.match(text)
    if match is None:
        raise ConfigFormatError(f"Invalid memory size {value!r}", field=field)
    number, unit = match.groups()
    try:
        size = Decimal(number)
    except ArithmeticError as exc:
        raise ConfigFormatError(f"Invalid memory size {value!r}", field=field) from exc
    return int(size * _MEMORY_UNITS[(unit or "").lower()])


def bytes_to_mib(value: int | None) -> int | None:
    """Convert bytes to whole MiB, the unit ECS container definitions use."""
    if value is None:
        return None
    return value // MIB
