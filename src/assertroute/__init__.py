"""Assertions that fail fast, and wrappers that route their failures to fallbacks."""

from assertroute.core import assert_never, assert_that, ok
from assertroute.failures import (
    CALLER_KEY,
    FAILURE_CODE,
    AssertFailure,
    is_failure,
    make_failure,
    to_failure,
)
from assertroute.results import Checked, Passed, Rejected, check, narrow
from assertroute.routing import RouteOptions, route, route_async, route_with, wrap, wrap_async
from assertroute.summarize import MISSING, summarize
from assertroute.validation import is_valid

__all__ = [
    "AssertFailure",
    "CALLER_KEY",
    "Checked",
    "FAILURE_CODE",
    "MISSING",
    "Passed",
    "Rejected",
    "RouteOptions",
    "assert_never",
    "assert_that",
    "check",
    "is_failure",
    "is_valid",
    "make_failure",
    "narrow",
    "ok",
    "route",
    "route_async",
    "route_with",
    "summarize",
    "to_failure",
    "wrap",
    "wrap_async",
]
