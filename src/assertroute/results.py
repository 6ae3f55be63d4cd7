"""Checked results: a validated value, or the failure that rejected it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from assertroute.failures import AssertFailure, is_failure

T = TypeVar("T")

Guard = Callable[[Any], Any]


@dataclass(frozen=True)
class Passed(Generic[T]):
    """Value that went through every guard."""

    value: T
    ok: bool = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Rejected:
    """Failure raised by the first guard that rejected the value."""

    failure: AssertFailure
    ok: bool = False

    def unwrap(self) -> NoReturn:
        raise self.failure


Checked = Union[Passed[T], Rejected]


def check(value: T, *guards: Guard) -> Checked[T]:
    """Run ``guards`` against ``value`` and report the outcome without raising."""
    try:
        for guard in guards:
            guard(value)
    except Exception as exc:
        if is_failure(exc):
            return Rejected(exc)
        raise
    return Passed(value)


def narrow(value: T, *guards: Guard) -> T:
    """Return ``value`` if every guard accepts it, otherwise raise the failure."""
    return check(value, *guards).unwrap()
