from __future__ import annotations

from collections.abc import Mapping
import datetime as dt

from assertroute.summarize import MISSING, summarize


class Widget:
    def __repr__(self) -> str:
        return "Widget()"


class BrokenRepr:
    def __repr__(self) -> str:
        raise RuntimeError("no repr")


class AngryMapping(Mapping):
    def __getitem__(self, key):
        raise RuntimeError("no items")

    def __iter__(self):
        raise RuntimeError("no iteration")

    def __len__(self) -> int:
        return 1


def helper() -> None:
    return None


def test_summarize_null_and_missing():
    assert summarize(None) == "null"
    assert summarize(MISSING) == "undefined"


def test_summarize_list_truncates_after_three_items():
    assert summarize([1, 2, 3, 4]) == "array(len=4, sample=[1, 2, 3, …])"
    assert summarize([1, 2]) == "array(len=2, sample=[1, 2])"
    assert summarize(()) == "array(len=0, sample=[])"


def test_summarize_mapping_lists_first_keys_in_order():
    assert summarize({"b": 1, "a": 2, "c": 3, "d": 4}) == "object(keys=[b, a, c, …])"
    assert summarize({"only": 1}) == "object(keys=[only])"


def test_summarize_string_sample():
    assert summarize("short") == 'string(len=5, sample="short")'
    assert summarize("hello world, long") == 'string(len=17, sample="hello world,…")'


def test_summarize_scalars_and_callables():
    assert summarize(42) == "int(42)"
    assert summarize(1.5) == "float(1.5)"
    assert summarize(True) == "bool(True)"
    assert summarize(helper) == "function(helper)"
    assert summarize(lambda: None) == "function(anonymous)"
    assert summarize(Widget) == "class(Widget)"
    assert summarize(Widget()) == "Widget(Widget())"
    assert summarize(dt.date(2024, 1, 2)) == "date(2024-01-02)"
    assert summarize(b"abc") == "bytes(len=3)"


def test_summarize_bounds_long_elements():
    text = summarize(["x" * 100])
    assert text.startswith("array(len=1, sample=['xxx")
    assert "…" in text
    assert len(text) < 60


def test_summarize_respects_explicit_limits():
    assert summarize([1, 2, 3], max_items=1) == "array(len=3, sample=[1, …])"
    assert summarize("abcdef", max_chars=2) == 'string(len=6, sample="ab…")'


def test_summarize_never_raises_on_cycles_or_broken_access():
    cyclic: list = []
    cyclic.append(cyclic)
    nested: dict = {}
    nested["self"] = nested

    assert summarize(cyclic).startswith("array(len=1")
    assert summarize(nested) == "object(keys=[self])"
    assert summarize(BrokenRepr()) == "BrokenRepr(<unrepresentable BrokenRepr>)"
    assert summarize(AngryMapping()) == "<unrepresentable AngryMapping>"


def test_summarize_clamps_negative_limits():
    assert summarize("abcdef", max_chars=-1) == 'string(len=6, sample="…")'
    assert summarize([1, 2, 3], max_items=-2) == "array(len=3, sample=[…])"
