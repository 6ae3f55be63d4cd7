"""The assertion primitive every guard routes its failures through."""

from __future__ import annotations

from typing import Any, Mapping, NoReturn

from assertroute.failures import AssertFailure
from assertroute.summarize import summarize


def ok(condition: Any, message: str = "Assertion failed", info: Mapping[str, Any] | None = None) -> None:
    """Raise an AssertFailure when ``condition`` is falsy."""
    if not condition:
        raise AssertFailure(message, info)


assert_that = ok


def assert_never(value: Any, message: str = "Unreachable") -> NoReturn:
    """Mark a branch that must not be reached."""
    raise AssertFailure(message, {"got": summarize(value)})
