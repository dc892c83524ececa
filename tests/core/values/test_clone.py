# tests/core/values/test_clone.py

from atlas_params.core.values.clone import clone_value


def test_clone_is_deep_and_structural():
    original = {"a": [1, {"b": "c"}], "t": (1, 2)}
    out = clone_value(original)

    assert out == {"a": [1, {"b": "c"}], "t": [1, 2]}
    assert out is not original
    assert out["a"] is not original["a"]
    assert out["a"][1] is not original["a"][1]

    out["a"][1]["b"] = "changed"
    assert original["a"][1]["b"] == "c"


def test_scalars_are_returned_as_is():
    for value in ("x", 0, False, None, 1.5):
        assert clone_value(value) is value
