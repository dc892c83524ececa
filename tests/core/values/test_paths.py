# tests/core/values/test_paths.py
"""
Testes de caminhos em árvores de valores (parse, formatação e navegação).
"""

from types import MappingProxyType

import pytest

from atlas_params.core.values.paths import MISSING, format_path, get_by_path, has_path, join_path, parse_path


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ()),
        (None, ()),
        ("a", ("a",)),
        ("a.b.c", ("a", "b", "c")),
        ("filters[0].value", ("filters", 0, "value")),
        ("matrix[1][2]", ("matrix", 1, 2)),
        (("a", 0), ("a", 0)),
    ],
)
def test_parse_path(text, expected):
    assert parse_path(text) == expected


@pytest.mark.parametrize("text", ["a..b", "a[x]", "a[0", "a[0]b"])
def test_parse_path_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        parse_path(text)


def test_format_path():
    assert format_path(()) == ""
    assert format_path(("filters", 0, "value")) == "filters[0].value"
    assert parse_path(format_path(("a", "b", 3))) == ("a", "b", 3)


def test_join_path():
    assert join_path(("a",), 0, "b") == ("a", 0, "b")


def test_get_by_path_navigates_mappings_and_lists():
    tree = {"filters": [{"value": "a"}, {"value": None}]}
    assert get_by_path(tree, "filters[0].value") == "a"
    assert get_by_path(tree, ("filters", 1, "value")) is None
    assert get_by_path(tree, "") is tree


def test_get_by_path_never_raises():
    tree = {"filters": [{"value": "a"}], "name": "x"}
    assert get_by_path(tree, "filters[5].value") is MISSING
    assert get_by_path(tree, "name.inner") is MISSING
    assert get_by_path(tree, ("name", 0)) is MISSING
    assert get_by_path(None, "a") is MISSING
    assert get_by_path(tree, "nope", default="d") == "d"


def test_missing_is_distinct_from_none():
    assert has_path({"a": None}, "a") is True
    assert has_path({}, "a") is False
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_get_by_path_accepts_any_mapping():
    tree = MappingProxyType({"options": MappingProxyType({"kind": "sql"})})
    assert get_by_path(tree, "options.kind") == "sql"
    assert has_path(tree, ("options",)) is True
