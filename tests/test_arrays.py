import pytest

from jsonnetkit.arrays import (
    filter_array,
    flat_map,
    join,
    make_array,
    make_range,
    reverse,
    sort_array,
)
from jsonnetkit.values import JsonnetError


def test_join_strings_skips_null():
    assert join(",", ["a", None, "b"]) == ",".join(["a", "b"])
    assert join("-", []) == ""


def test_join_arrays():
    assert join([0], [[1], None, [2]]) == [1, 0, 2]
    assert join([], [[1], [2, 3]]) == [1] + [2, 3]


def test_join_errors():
    with pytest.raises(JsonnetError, match="expected string"):
        join(",", ["a", 1])
    with pytest.raises(JsonnetError, match="expected array"):
        join([0], [[1], "x"])
    with pytest.raises(JsonnetError, match="join first parameter should be string or array, got number"):
        join(1, [])
    with pytest.raises(JsonnetError, match="expected array"):
        join(",", "ab")


def test_reverse():
    items = [1, "a", None, [2]]
    assert reverse(items) == items[::-1]
    assert reverse(reverse(items)) == items
    with pytest.raises(JsonnetError, match="expected array"):
        reverse("abc")


def test_make_array():
    result = make_array(5, lambda i: i * i)
    assert len(result) == 5
    for position, value in enumerate(result):
        assert value == position * position
    assert make_array(0, lambda i: i) == []


def test_make_array_errors():
    with pytest.raises(JsonnetError, match="expected function"):
        make_array(3, "f")
    with pytest.raises(JsonnetError, match="Expected an integer"):
        make_array(1.5, lambda i: i)


def test_flat_map_array():
    assert flat_map(lambda x: [x, x], [1, 2]) == [1, 1, 2, 2]
    assert flat_map(lambda x: [], [1, 2]) == []


def test_flat_map_string():
    assert flat_map(lambda c: c + c, "ab") == "aabb"


def test_flat_map_errors():
    with pytest.raises(JsonnetError, match="std.flatMap second param must be array / string, got number"):
        flat_map(lambda x: [x], 3)
    with pytest.raises(JsonnetError, match="expected array"):
        flat_map(lambda x: x, [1])
    with pytest.raises(JsonnetError, match="expected string"):
        flat_map(lambda c: 1, "ab")


def test_filter_array():
    items = [1, 2, 3, 4]
    kept = filter_array(lambda x: x > 2, items)
    assert kept == [x for x in items if x > 2]
    assert filter_array(lambda x: True, items) == items


def test_filter_array_requires_boolean():
    with pytest.raises(JsonnetError, match="expected boolean"):
        filter_array(lambda x: 1, [1])


def test_make_range():
    result = make_range(3, 7)
    assert result == list(range(3, 8))
    assert len(make_range(-2, 2)) == 2 - (-2) + 1
    assert make_range(5, 4) == []


def test_make_range_errors():
    with pytest.raises(JsonnetError, match="expected number"):
        make_range("1", 2)


def test_sort_array_default_key():
    items = [3, 1, 2, 5, 4]
    assert sort_array(items) == sorted(items)
    words = ["pear", "apple", "fig"]
    assert sort_array(words) == sorted(words)


def test_sort_array_is_stable():
    items = [{"k": 2, "n": "a"}, {"k": 1, "n": "b"}, {"k": 2, "n": "c"}, {"k": 1, "n": "d"}]
    result = sort_array(items, lambda item: item["k"])
    keys = [item["k"] for item in result]
    assert keys == sorted(keys)
    ones = [item["n"] for item in result if item["k"] == 1]
    twos = [item["n"] for item in result if item["k"] == 2]
    assert ones == [item["n"] for item in items if item["k"] == 1]
    assert twos == [item["n"] for item in items if item["k"] == 2]


def test_sort_array_errors():
    with pytest.raises(JsonnetError):
        sort_array([1, "a"])
    with pytest.raises(JsonnetError, match="expected function"):
        sort_array([1], 5)
    with pytest.raises(JsonnetError, match="expected array"):
        sort_array("abc")