"""Common type guards built on :func:`assertroute.core.ok`."""

from __future__ import annotations

from collections.abc import Mapping
import math
from typing import Any, Iterable

from assertroute.core import ok
from assertroute.summarize import MISSING, summarize


def _got(x: Any, info: Mapping[str, Any] | None) -> dict[str, Any]:
    return {**(info or {}), "got": summarize(x)}


def is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool) and math.isfinite(x)


def assert_string(x: Any, message: str = "Expected string", info: Mapping[str, Any] | None = None) -> None:
    ok(isinstance(x, str), message, _got(x, info))


def assert_number(x: Any, message: str = "Expected number", info: Mapping[str, Any] | None = None) -> None:
    """Finite int or float; bools are rejected."""
    ok(is_number(x), message, _got(x, info))


def assert_boolean(x: Any, message: str = "Expected boolean", info: Mapping[str, Any] | None = None) -> None:
    ok(isinstance(x, bool), message, _got(x, info))


def assert_list(x: Any, message: str = "Expected list", info: Mapping[str, Any] | None = None) -> None:
    ok(isinstance(x, list), message, _got(x, info))


def assert_mapping(x: Any, message: str = "Expected mapping", info: Mapping[str, Any] | None = None) -> None:
    ok(isinstance(x, Mapping), message, _got(x, info))


def assert_callable(x: Any, message: str = "Expected callable", info: Mapping[str, Any] | None = None) -> None:
    ok(callable(x), message, _got(x, info))


def assert_defined(x: Any, message: str = "Expected value present", info: Mapping[str, Any] | None = None) -> None:
    ok(x is not None and x is not MISSING, message, _got(x, info))


def assert_instance_of(
    x: Any, cls: type | tuple[type, ...], message: str | None = None, info: Mapping[str, Any] | None = None
) -> None:
    if message is None:
        names = cls if isinstance(cls, tuple) else (cls,)
        message = f"Expected instance of {' | '.join(getattr(c, '__name__', '<class>') for c in names)}"
    ok(isinstance(x, cls), message, {**(info or {}), "got": type(x).__name__})


def assert_non_empty_string(x: Any, message: str = "Expected non-empty string") -> None:
    assert_string(x, message)
    ok(len(x) > 0, message, _got(x, None))


def assert_one_of(x: Any, options: Iterable[Any], message: str | None = None) -> None:
    choices = list(options)
    ok(x in choices, message or f"Expected one of [{', '.join(map(str, choices))}]", _got(x, None))


def expect_string(x: Any, message: str = "Expected string") -> str:
    assert_string(x, message)
    return x


def expect_number(x: Any, message: str = "Expected number") -> float:
    assert_number(x, message)
    return x


def expect_list(x: Any, message: str = "Expected list") -> list[Any]:
    assert_list(x, message)
    return x


def expect_mapping(x: Any, message: str = "Expected mapping") -> Mapping[str, Any]:
    assert_mapping(x, message)
    return x
