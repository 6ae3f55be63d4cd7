"""Boolean validation over a sequence of assertions."""

from __future__ import annotations

from typing import Any, Callable

from assertroute.failures import is_failure


def is_valid(*assertions: Callable[..., Any]) -> Callable[..., bool]:
    """Build a predicate that runs ``assertions`` against the same arguments.

    The predicate returns False at the first assertion failure, without running
    the remaining assertions. Any other exception propagates unchanged.
    """

    def validate(*args: Any, **kwargs: Any) -> bool:
        try:
            for assertion in assertions:
                assertion(*args, **kwargs)
        except Exception as exc:
            if is_failure(exc):
                return False
            raise
        return True

    return validate
