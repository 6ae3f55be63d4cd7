"""Bounded, human-readable value descriptions for failure messages."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
import datetime as _dt
from itertools import islice
import numbers
from typing import Any, Callable, Iterable

from assertroute.config import DEFAULT_SETTINGS

ELLIPSIS = "…"


class _Missing:
    """Marker for an absent value, distinct from ``None``."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def summarize(value: Any, *, max_items: int | None = None, max_chars: int | None = None) -> str:
    """Describe ``value`` in a short string; never raises."""
    items = DEFAULT_SETTINGS.summary_max_items if max_items is None else max(0, max_items)
    chars = DEFAULT_SETTINGS.summary_max_chars if max_chars is None else max(0, max_chars)
    try:
        return _summarize(value, items, chars)
    except Exception:
        return _placeholder(value)


def _summarize(value: Any, max_items: int, max_chars: int) -> str:
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, str):
        sample = value[:max_chars] + (ELLIPSIS if len(value) > max_chars else "")
        return f'string(len={len(value)}, sample="{sample}")'
    if isinstance(value, bool):
        return f"bool({value})"
    if isinstance(value, numbers.Number):
        return f"{type(value).__name__}({_bounded(value, str)})"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"{type(value).__name__}(len={len(value)})"
    if isinstance(value, Mapping):
        keys = [str(key) for key in islice(iter(value), max_items + 1)]
        return f"object(keys=[{_join(keys, max_items)}])"
    if isinstance(value, Sequence):
        return f"array(len={len(value)}, sample=[{_sample(value, max_items)}])"
    if isinstance(value, Set):
        return f"set(len={len(value)}, sample=[{_sample(value, max_items)}])"
    if isinstance(value, (_dt.date, _dt.time)):
        return f"date({value.isoformat()})"
    if isinstance(value, type):
        return f"class({value.__name__})"
    if callable(value):
        name = getattr(value, "__name__", None)
        if name == "<lambda>":
            name = "anonymous"
        return f"function({name or type(value).__name__})"
    return f"{type(value).__name__}({_bounded_repr(value)})"


def _sample(values: Iterable[Any], max_items: int) -> str:
    rendered = [_bounded_repr(item) for item in islice(iter(values), max_items + 1)]
    return _join(rendered, max_items)


def _join(rendered: list[str], max_items: int) -> str:
    if len(rendered) > max_items:
        return ", ".join(rendered[:max_items] + [ELLIPSIS])
    return ", ".join(rendered)


def _bounded_repr(value: Any) -> str:
    return _bounded(value, repr)


def _bounded(value: Any, render: Callable[[Any], str]) -> str:
    limit = DEFAULT_SETTINGS.element_max_chars
    try:
        text = render(value)
    except Exception:
        return _placeholder(value)
    if len(text) > limit:
        return text[: limit - 1] + ELLIPSIS
    return text


def _placeholder(value: Any) -> str:
    try:
        return f"<unrepresentable {type(value).__name__}>"
    except Exception:
        return "<unrepresentable>"
