"""One-line reference for the public functions."""

from __future__ import annotations

import sys
from typing import TextIO

DOCS: dict[str, str] = {
    # routing
    "route": "route(fallback, fn, options=None, *args) -> wrapped | result; fallback on AssertFailure",
    "route_async": "route_async(fallback, fn, options=None, *args) -> async wrapped | coroutine",
    "route_with": "route_with(fallback=None, options=None) -> decorator over wrap / wrap_async",
    "wrap": "wrap(fallback, fn, options=None) -> wrapped function",
    "wrap_async": "wrap_async(fallback, fn, options=None) -> async wrapped function",
    "RouteOptions": "RouteOptions(on_failure=None, recover_non_failure_exceptions=False)",
    "is_valid": "is_valid(*assertions)(*args) -> bool; AssertFailure -> False, others propagate",
    # core
    "ok": "ok(condition, message='Assertion failed', info=None); base assertion",
    "assert_that": "assert_that(condition, message='Assertion failed', info=None); alias of ok",
    "assert_never": "assert_never(value, message='Unreachable'); always fails",
    "summarize": "summarize(value, max_items=None, max_chars=None) -> str",
    "make_failure": "make_failure(message=None, info=None, cause=None) -> AssertFailure",
    "to_failure": "to_failure(exc) -> AssertFailure; normalize any exception",
    "is_failure": "is_failure(value) -> bool; checks the ASSERT_FAILED code",
    # results
    "check": "check(value, *guards) -> Passed | Rejected",
    "narrow": "narrow(value, *guards) -> value, or raises the failure",
    # guards
    "assert_string": "assert_string(x)",
    "assert_number": "assert_number(x); finite int/float, not bool",
    "assert_boolean": "assert_boolean(x)",
    "assert_list": "assert_list(x)",
    "assert_mapping": "assert_mapping(x)",
    "assert_callable": "assert_callable(x)",
    "assert_defined": "assert_defined(x); not None and not MISSING",
    "assert_instance_of": "assert_instance_of(x, cls)",
    "assert_non_empty_string": "assert_non_empty_string(x)",
    "assert_one_of": "assert_one_of(x, options)",
    "expect_string": "expect_string(x) -> str",
    "expect_number": "expect_number(x) -> int | float",
    "expect_list": "expect_list(x) -> list",
    "expect_mapping": "expect_mapping(x) -> Mapping",
}


def describe(print_table: bool = True, stream: TextIO | None = None) -> dict[str, str]:
    """Return the function reference, writing it as a table to ``stream`` (stdout by default)."""
    if print_table:
        out = stream if stream is not None else sys.stdout
        width = max(len(name) for name in DOCS)
        out.write("[assertroute] available functions\n")
        for name, doc in DOCS.items():
            out.write(f"{name.ljust(width)}  {doc}\n")
    return dict(DOCS)
