"""Nested string-keyed mapping with ruby-like ``dig`` access."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, MutableMapping, MutableSequence, Sequence
from collections.abc import Mapping as AbcMapping
from typing import Any, TypeAlias, override


log = logging.getLogger(__name__)

Scalar: TypeAlias = str | int | float | bool
Value: TypeAlias = "Mapping | list[Mapping] | list[Scalar] | Scalar | None"

_SCALAR_TYPES = (str, int, float, bool)
_TEXT_TYPES = (str, bytes, bytearray)


class Mapping(MutableMapping[str, Any]):
    """Nested key-value map with string keys, as decoded from YAML or JSON.

    Construction is shallow, like ``dict(...)``. Nested maps have to be
    ``Mapping`` instances to be traversed by :meth:`dig`; use :func:`normalize`
    to convert a plain decoded tree.

    Both ``copy.copy`` and ``copy.deepcopy`` return a full :meth:`dup`, so a
    copy never shares nested containers with the original.
    """

    def __init__(self, data: AbcMapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        super().__init__()
        self._data: dict[str, Any] = dict(data or {}, **kwargs)

    @override
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    @override
    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    @override
    def __delitem__(self, key: str) -> None:
        del self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __repr__(self) -> str:
        return repr(self._data)

    def __copy__(self) -> Mapping:
        return self.dup()

    def __deepcopy__(self, memo: dict[int, Any]) -> Mapping:
        return self.dup()

    def dig(self, *keys: str) -> Value:
        """Return a value from a (deeply) nested tree, or None.

        Traversal only continues through ``Mapping`` values. A missing key,
        a non-mapping value in the middle of the path, and a key holding
        ``None`` all produce ``None``.
        """
        if not keys:
            return None
        value = self._data.get(keys[0])
        if isinstance(value, Mapping):
            if len(keys) == 1:
                return value
            return value.dig(*keys[1:])
        if len(keys) > 1:
            return None
        return value

    def dig_string(self, *keys: str) -> str:
        """Like :meth:`dig` but returns an empty string for anything that is not a str."""
        value = self.dig(*keys)
        if not isinstance(value, str):
            return ""
        return value

    def dig_mapping(self, *keys: str) -> Mapping:
        """Return the mapping at the end of the path, creating it when needed.

        Missing keys and keys holding anything but a ``Mapping`` are
        overwritten with a new empty ``Mapping``; the replaced value is lost.
        The returned mapping is part of this tree, so writes through it are
        visible from the root.
        """
        if not keys:
            msg = "at least one key is required"
            raise ValueError(msg)

        current = self
        for key in keys:
            value = current._data.get(key)
            if not isinstance(value, Mapping):
                if key in current._data:
                    log.debug("replacing %s value at %r with a mapping", type(value).__name__, key)
                value = Mapping()
                current._data[key] = value
            current = value
        return current

    def has_key(self, key: str) -> bool:
        """Return True when the key exists at this level, even if it holds None."""
        return key in self._data

    def has_mapping(self, key: str) -> bool:
        """Return True when the key exists at this level and holds a Mapping."""
        return isinstance(self._data.get(key), Mapping)

    def dup(self) -> Mapping:
        """Return a deep copy that shares no containers with this mapping."""
        return Mapping({key: dup_value(value) for key, value in self._data.items()})

    def to_dict(self) -> dict[str, Any]:
        """Return a detached plain-dict tree suitable for encoders."""
        return {key: _to_plain(value) for key, value in self._data.items()}


def _to_plain(value: Any) -> Any:
    if isinstance(value, AbcMapping):
        return {str(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_to_plain(item) for item in value]
    return value


def dup_value(value: Any) -> Any:
    """Copy a mapping value without aliasing any container.

    Plain maps found anywhere in the value, including inside any sequence
    type, are converted to ``Mapping``. Mutable sequences keep their type,
    other sequences become lists.
    """
    if isinstance(value, Mapping):
        return value.dup()
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, list):
        return [dup_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(dup_value(item) for item in value)
    if isinstance(value, AbcMapping):
        return normalize(value)
    if isinstance(value, set | frozenset):
        return type(value)(dup_value(item) for item in value)
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        items = [dup_value(item) for item in value]
        if isinstance(value, MutableSequence):
            return type(value)(items)
        return items
    return copy.deepcopy(value)


def stringify_key(key: Any) -> str:
    """Render a decoded map key as a string key.

    Booleans and None use their YAML spellings.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def normalize_value(value: Any) -> Value:
    """Convert every map in a decoded value into a ``Mapping``, recursively."""
    if isinstance(value, AbcMapping):
        return normalize(value)
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return [normalize_value(item) for item in value]
    return value


def normalize(data: AbcMapping[Any, Any] | None) -> Mapping:
    """Build a ``Mapping`` from a decoded map, stringifying non-string keys.

    ``None`` produces an empty mapping. When two keys stringify to the same
    string the one iterated last wins.
    """
    if data is None:
        return Mapping()
    if not isinstance(data, AbcMapping):
        msg = f"cannot normalize {type(data).__name__} into a mapping"
        raise TypeError(msg)
    return Mapping({stringify_key(key): normalize_value(value) for key, value in data.items()})
