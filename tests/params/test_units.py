"""Tests for time and memory parsing."""

import pytest

from ecs_cli_config.errors import ConfigFormatError
from ecs_cli_config.params.units import bytes_to_mib, parse_duration, parse_memory, parse_time_field


@pytest.mark.parametrize(
    ("text", "seconds"),
    [
        ("1m30s", 90),
        ("30s", 30),
        ("1h", 3600),
        ("1h2m3s", 3723),
        ("1.5s", 1),
        ("1.5m", 90),
        ("500ms", 0),
        ("0", 0),
        ("-2s", -2),
    ],
)
def test_parse_duration(text: str, seconds: int) -> None:
    assert parse_duration(text) == seconds


@pytest.mark.parametrize("text", ["45", "abc", "1m30", "s", ""])
def test_parse_duration_rejects(text: str) -> None:
    with pytest.raises(ValueError):
        parse_duration(text)


def test_time_field_accepts_duration_string() -> None:
    assert parse_time_field("1m30s") == 90


def test_time_field_accepts_integer_string() -> None:
    assert parse_time_field("45") == 45


def test_time_field_accepts_integer() -> None:
    assert parse_time_field(45) == 45


@pytest.mark.parametrize("value", [None, ""])
def test_time_field_unset(value: object) -> None:
    assert parse_time_field(value) is None


@pytest.mark.parametrize("value", ["abc", "1.5", True, 1.5, [30]])
def test_time_field_rejects(value: object) -> None:
    with pytest.raises(ConfigFormatError) as excinfo:
        parse_time_field(value, field="healthcheck.timeout")

    assert excinfo.value.field == "healthcheck.timeout"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1024, 1024),
        ("1024", 1024),
        ("512m", 512 * 1024**2),
        ("512MB", 512 * 1024**2),
        ("1g", 1024**3),
        ("1.5GB", 1536 * 1024**2),
        ("2 GiB", 2 * 1024**3),
        ("4k", 4096),
    ],
)
def test_parse_memory(value: object, expected: int) -> None:
    assert parse_memory(value) == expected


@pytest.mark.parametrize("value", ["lots", "12x", "-5m", True])
def test_parse_memory_rejects(value: object) -> None:
    with pytest.raises(ConfigFormatError):
        parse_memory(value, field="mem_limit")


def test_parse_memory_unset() -> None:
    assert parse_memory(None) is None


def test_bytes_to_mib() -> None:
    assert bytes_to_mib(512 * 1024**2) == 512
    assert bytes_to_mib(None) is None
