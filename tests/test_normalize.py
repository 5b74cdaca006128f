import datetime
from collections import OrderedDict, deque

import pytest

from digmap.mapping import Mapping, normalize, normalize_value, stringify_key


def test_normalize_converts_nested_maps() -> None:
    result = normalize({"a": {"b": {"c": 1}}, "list": [{"x": 1}, [{"y": 2}], "s", None]})

    assert isinstance(result, Mapping)
    assert isinstance(result["a"], Mapping)
    assert isinstance(result.dig("a", "b"), Mapping)
    assert result.dig("a", "b", "c") == 1

    items = result["list"]
    assert isinstance(items[0], Mapping)
    assert isinstance(items[1][0], Mapping)
    assert items[2:] == ["s", None]


def test_normalize_stringifies_keys() -> None:
    result = normalize({1: "one", 2.5: "float", False: "no", None: "nothing", (1, 2): "tuple"})
    assert result == {"1": "one", "2.5": "float", "false": "no", "null": "nothing", "(1, 2)": "tuple"}


def test_normalize_key_collision_last_wins() -> None:
    result = normalize(OrderedDict([(1, "int"), ("1", "str")]))
    assert result == {"1": "str"}


def test_normalize_none_gives_empty_mapping() -> None:
    result = normalize(None)
    assert isinstance(result, Mapping)
    assert len(result) == 0


def test_normalize_keeps_null_leaves() -> None:
    result = normalize({"foo": None})
    assert result.has_key("foo")
    assert result["foo"] is None
    assert not result.has_mapping("foo")


def test_normalize_rejects_non_mapping_root() -> None:
    with pytest.raises(TypeError, match="cannot normalize list into a mapping"):
        _ = normalize([1, 2])  # type: ignore[arg-type]


def test_normalize_copies_input() -> None:
    source = {"a": {"b": [1, 2]}}
    result = normalize(source)
    result.dig("a", "b").append(3)
    result.dig_mapping("a")["c"] = 1
    assert source == {"a": {"b": [1, 2]}}


def test_normalize_value_passes_leaves_through() -> None:
    when = datetime.date(2024, 1, 2)
    assert normalize_value(when) is when
    assert normalize_value(1.5) == 1.5
    assert normalize_value(None) is None
    assert normalize_value((1, {"a": 1})) == [1, {"a": 1}]
    assert isinstance(normalize_value((1, {"a": 1}))[1], Mapping)
    assert normalize_value(b"raw") == b"raw"
    assert normalize_value("text") == "text"


def test_normalize_value_walks_any_sequence() -> None:
    result = normalize_value(deque([{"a": {"b": 1}}, "x"]))
    assert isinstance(result, list)
    assert isinstance(result[0], Mapping)
    assert result[0].dig("a", "b") == 1
    assert result[1] == "x"


def test_normalize_rebuilds_existing_mappings() -> None:
    inner = Mapping(x=1)
    result = normalize({"inner": inner})
    assert result["inner"] == inner
    assert result["inner"] is not inner


@pytest.mark.parametrize(
    ("key", "expected"),
    [("name", "name"), (1, "1"), (False, "false"), (True, "true"), (None, "null"), (0.1, "0.1")],
)
def test_stringify_key(key: object, expected: str) -> None:
    assert stringify_key(key) == expected
