"""Failure type raised by invariant checks, and helpers to recognise and build it."""

from __future__ import annotations

import inspect
from types import MappingProxyType
from typing import Any, Mapping

from assertroute.summarize import MISSING, summarize

FAILURE_CODE = "ASSERT_FAILED"
CALLER_KEY = "caller"
DEFAULT_CALLER = "assert"

# Frames from these modules are skipped when naming the caller of a failed check.
_INTERNAL_MODULES = frozenset({__name__, "assertroute.core", "assertroute.routing"})
_FROZEN_FIELDS = frozenset({"message", "info", "cause", "code", "caller"})


class AssertFailure(Exception):
    """Expected, recoverable failure of an invariant check.

    Instances are immutable and always carry ``code == FAILURE_CODE``, which is
    what route wrappers and validators look for when deciding whether an
    exception is recoverable.
    """

    code: str = FAILURE_CODE

    def __init__(
        self,
        message: str | None = None,
        info: Mapping[str, Any] | None = None,
        cause: Any = None,
    ) -> None:
        caller = _caller_name()
        resolved = message or f"{caller} failed"
        details = dict(info or {})
        value = details.get("value", MISSING)
        if value is not MISSING:
            resolved = f"{resolved} (got: {summarize(value)})"
        details[CALLER_KEY] = caller
        self._populate(resolved, details, cause, caller)

    def _populate(self, message: str, details: dict[str, Any], cause: Any, caller: str) -> None:
        Exception.__init__(self, message)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "info", MappingProxyType(details))
        object.__setattr__(self, "cause", cause)
        object.__setattr__(self, "caller", caller)
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        # Rebuild from resolved fields so the summary suffix and caller are not recomputed.
        return _rebuild_failure, (type(self), self.message, dict(self.info), self.cause, self.caller)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FROZEN_FIELDS:
            raise AttributeError(f"AssertFailure.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _FROZEN_FIELDS:
            raise AttributeError(f"AssertFailure.{name} is read-only")
        super().__delattr__(name)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"AssertFailure(code={self.code!r}, message={self.message!r})"


def make_failure(
    message: str | None = None,
    info: Mapping[str, Any] | None = None,
    cause: Any = None,
) -> AssertFailure:
    """Build a failure without raising it."""
    return AssertFailure(message, info, cause)


def is_failure(value: Any) -> bool:
    """Return True when ``value`` carries the assertion failure discriminant."""
    return isinstance(value, BaseException) and getattr(value, "code", None) == FAILURE_CODE


def to_failure(value: Any) -> AssertFailure:
    """Normalize an arbitrary caught value into a failure, keeping it as the cause."""
    if is_failure(value):
        return value
    if isinstance(value, BaseException):
        message = _describe(value) or type(value).__name__
        return AssertFailure(message, {"exception": type(value).__name__}, cause=value)
    return AssertFailure(_describe(value) or summarize(value), cause=value)


def _describe(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return summarize(value)


def _caller_name() -> str:
    try:
        frame = inspect.currentframe()
        try:
            while frame is not None and frame.f_globals.get("__name__") in _INTERNAL_MODULES:
                frame = frame.f_back
            name = frame.f_code.co_name if frame is not None else ""
        finally:
            del frame
    except Exception:
        return DEFAULT_CALLER
    if not name or name.startswith("<"):
        return DEFAULT_CALLER
    return name


def _rebuild_failure(
    cls: type[AssertFailure], message: str, details: dict[str, Any], cause: Any, caller: str
) -> AssertFailure:
    failure = cls.__new__(cls, message)
    failure._populate(message, details, cause, caller)
    return failure
