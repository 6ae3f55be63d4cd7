"""Route wrappers that turn assertion failures into fallback values."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

from assertroute.failures import AssertFailure, is_failure, to_failure
from assertroute.summarize import summarize
from assertroute.util.logging import get_logger

T = TypeVar("T")

OnFailure = Callable[[AssertFailure], Any]

logger = get_logger(__name__)


class RouteOptions(BaseModel):
    """Per-call recovery options for a route wrapper."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    on_failure: OnFailure | None = None
    recover_non_failure_exceptions: bool = False


_DEFAULT_OPTIONS = RouteOptions()
_UNSET: Any = object()


def wrap(
    fallback: T,
    fn: Callable[..., T],
    options: RouteOptions | Mapping[str, Any] | None = None,
) -> Callable[..., T]:
    """Wrap ``fn`` so an AssertFailure yields ``fallback`` instead of raising."""
    _require_callable(fn)
    opts = _coerce_options(options)

    @functools.wraps(fn)
    def wrapped(*args: Any, **kwargs: Any) -> T:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            failure = _as_recoverable(exc, opts)
            if failure is None:
                raise
            return _fallback(failure, fallback, opts)

    return wrapped


def wrap_async(
    fallback: T,
    fn: Callable[..., Awaitable[T]],
    options: RouteOptions | Mapping[str, Any] | None = None,
) -> Callable[..., Awaitable[T]]:
    """Async counterpart of :func:`wrap`.

    ``fn`` may be a coroutine function or any callable returning an awaitable.
    Failures raised before the first suspension and failures raised while
    awaiting are handled the same way.
    """
    _require_callable(fn)
    opts = _coerce_options(options)

    @functools.wraps(fn)
    async def wrapped(*args: Any, **kwargs: Any) -> T:
        try:
            result = fn(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as exc:
            failure = _as_recoverable(exc, opts)
            if failure is None:
                raise
            return _fallback(failure, fallback, opts)

    return wrapped


def route(fallback_or_fn: Any, fn_or_options: Any = None, options: Any = _UNSET, *args: Any) -> Any:
    """Wrap a function with a fallback, or call it right away.

    ``route(fn)`` and ``route(fn, options)`` use ``None`` as the fallback;
    ``route(fallback, fn)`` and ``route(fallback, fn, options)`` use the given
    fallback. Which form applies depends only on whether the first argument is
    callable. Any positional arguments after the options slot invoke the
    wrapped function immediately and its result (or the fallback) is returned.
    """
    fallback, fn, opts, call_args = _resolve(fallback_or_fn, fn_or_options, options, args)
    wrapped = wrap(fallback, fn, opts)
    return wrapped(*call_args) if call_args else wrapped


def route_async(fallback_or_fn: Any, fn_or_options: Any = None, options: Any = _UNSET, *args: Any) -> Any:
    """Async counterpart of :func:`route`.

    With trailing arguments the result is still a coroutine, since the outcome
    is only known once it has been awaited.
    """
    fallback, fn, opts, call_args = _resolve(fallback_or_fn, fn_or_options, options, args)
    wrapped = wrap_async(fallback, fn, opts)
    return wrapped(*call_args) if call_args else wrapped


def route_with(
    fallback: Any = None,
    options: RouteOptions | Mapping[str, Any] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator form of :func:`wrap` / :func:`wrap_async`."""
    opts = _coerce_options(options)

    def decorate(fn: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(fn):
            return wrap_async(fallback, fn, opts)
        return wrap(fallback, fn, opts)

    return decorate


def _resolve(
    fallback_or_fn: Any, fn_or_options: Any, options: Any, args: tuple[Any, ...]
) -> tuple[Any, Callable[..., Any], Any, tuple[Any, ...]]:
    if callable(fallback_or_fn):
        # (fn, options, *args): the third slot already belongs to the call arguments.
        call_args = args if options is _UNSET else (options, *args)
        return None, fallback_or_fn, fn_or_options, call_args
    return fallback_or_fn, fn_or_options, None if options is _UNSET else options, args


def _coerce_options(options: Any) -> RouteOptions:
    if options is None:
        return _DEFAULT_OPTIONS
    if isinstance(options, RouteOptions):
        return options
    if isinstance(options, Mapping):
        return RouteOptions.model_validate(dict(options))
    raise TypeError(f"options must be RouteOptions, a mapping or None, got {summarize(options)}")


def _require_callable(fn: Any) -> None:
    if not callable(fn):
        raise TypeError(f"expected a callable to wrap, got {summarize(fn)}")


def _as_recoverable(exc: Exception, options: RouteOptions) -> AssertFailure | None:
    if is_failure(exc):
        return exc
    if options.recover_non_failure_exceptions:
        failure = to_failure(exc)
        logger.debug("normalized %s into failure: %s", type(exc).__name__, failure.message)
        return failure
    return None


def _fallback(failure: AssertFailure, fallback: T, options: RouteOptions) -> T:
    logger.debug("routing failure to fallback: %s", failure.message)
    if options.on_failure is not None:
        options.on_failure(failure)
    return fallback
