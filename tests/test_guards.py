from __future__ import annotations

import math

import pytest

from assertroute import MISSING, AssertFailure, route
from assertroute.guards import (
    assert_boolean,
    assert_callable,
    assert_defined,
    assert_instance_of,
    assert_list,
    assert_mapping,
    assert_number,
    assert_one_of,
    assert_string,
    expect_list,
    expect_mapping,
    expect_number,
    expect_string,
)


def test_guard_failures_carry_value_summary():
    with pytest.raises(AssertFailure) as exc:
        assert_string([1, 2, 3, 4])
    assert exc.value.message == "Expected string"
    assert exc.value.info["got"] == "array(len=4, sample=[1, 2, 3, …])"
    assert exc.value.info["caller"] == "assert_string"


def test_guard_keeps_extra_info():
    with pytest.raises(AssertFailure) as exc:
        assert_mapping("x", "config must be a mapping", {"path": "settings.toml"})
    assert exc.value.info["path"] == "settings.toml"
    assert exc.value.info["got"] == 'string(len=1, sample="x")'


@pytest.mark.parametrize(
    ("guard", "good", "bad"),
    [
        (assert_string, "a", 1),
        (assert_number, 1.5, math.nan),
        (assert_number, 3, True),
        (assert_boolean, False, 0),
        (assert_list, [], ()),
        (assert_mapping, {}, []),
        (assert_callable, len, "len"),
        (assert_defined, 0, None),
        (assert_defined, "", MISSING),
    ],
)
def test_guards_accept_and_reject(guard, good, bad):
    guard(good)
    with pytest.raises(AssertFailure):
        guard(bad)


def test_assert_instance_of_names_expected_class():
    with pytest.raises(AssertFailure) as exc:
        assert_instance_of("x", (int, float))
    assert exc.value.message == "Expected instance of int | float"
    assert exc.value.info["got"] == "str"
    assert_instance_of(1, int)


def test_assert_one_of():
    assert_one_of("b", ["a", "b"])
    with pytest.raises(AssertFailure) as exc:
        assert_one_of("z", ["a", "b"])
    assert exc.value.message == "Expected one of [a, b]"


def test_expect_helpers_return_value():
    assert expect_string("s") == "s"
    assert expect_number(2) == 2
    assert expect_list([1]) == [1]
    assert expect_mapping({"a": 1}) == {"a": 1}


def test_guards_compose_with_route():
    def port(value: object) -> int:
        return int(expect_number(value))

    assert route(8080, port, None, "80") == 8080
    assert route(8080, port, None, 443) == 443
