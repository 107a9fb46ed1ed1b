import pytest

from jsonnetkit.identifiers import IdentifierSet


def make_identifiers(n):
    return [f"id-{i:06d}" for i in range(n)]


@pytest.mark.parametrize("n", [1, 10, 100, 1000, 10000])
def test_to_ordered_list(n):
    idents = make_identifiers(n)
    s = IdentifierSet()
    s.add_identifiers(reversed(idents))
    assert s.to_ordered_list() == idents
    assert len(s) == n


def test_add_identifiers_deduplicates():
    s = IdentifierSet()
    s.add_identifiers(["b", "a", "b"])
    assert s.to_ordered_list() == ["a", "b"]


def test_empty():
    assert IdentifierSet().to_ordered_list() == []


def test_set_operations():
    a = IdentifierSet(["x", "y"])
    b = IdentifierSet(["y", "z"])
    assert a & b == {"y"}
    assert a | b == {"x", "y", "z"}
    assert a - b == {"x"}
    assert a ^ b == {"x", "z"}
    assert "x" in a and "z" not in a