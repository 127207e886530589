"""Constructors for JSON tree nodes."""

from __future__ import annotations

import struct
from typing import Iterable

from perfkit.jsonnode import JsonType, Node

__all__ = [
    "create_null",
    "create_true",
    "create_false",
    "create_bool",
    "create_number",
    "create_string",
    "create_raw",
    "create_array",
    "create_object",
    "create_int_array",
    "create_float_array",
    "create_double_array",
    "create_string_array",
]

_SINGLE = struct.Struct("f")


def _to_single(number: float) -> float:
    """Round ``number`` to single precision, as a C ``float`` would hold it."""
    return _SINGLE.unpack(_SINGLE.pack(number))[0]


def _require_text(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")
    return value


def create_null() -> Node:
    """Return a new null node."""
    return Node(type=JsonType.NULL)


def create_true() -> Node:
    """Return a new true node."""
    return Node(type=JsonType.TRUE)


def create_false() -> Node:
    """Return a new false node."""
    return Node(type=JsonType.FALSE)


def create_bool(value: object) -> Node:
    """Return a true node if ``value`` is truthy, otherwise a false node."""
    return Node(type=JsonType.TRUE if value else JsonType.FALSE)


def create_number(num: float) -> Node:
    """Return a number node holding ``num`` and its saturated integer part."""
    node = Node(type=JsonType.NUMBER)
    node.set_number(float(num))
    return node


def create_string(string: str) -> Node:
    """Return a string node holding ``string``."""
    return Node(type=JsonType.STRING, value_string=_require_text(string, "string"))


def create_raw(raw: str) -> Node:
    """Return a node whose text is emitted verbatim when rendered."""
    return Node(type=JsonType.RAW, value_string=_require_text(raw, "raw"))


def create_array() -> Node:
    """Return a new empty array node."""
    return Node(type=JsonType.ARRAY)


def create_object() -> Node:
    """Return a new empty object node."""
    return Node(type=JsonType.OBJECT)


def _array_of(items: Iterable[Node]) -> Node:
    array = create_array()
    array.children.extend(items)
    return array


def create_int_array(numbers: Iterable[int]) -> Node:
    """Return an array of number nodes built from integers."""
    return _array_of(create_number(int(n)) for n in numbers)


def create_float_array(numbers: Iterable[float]) -> Node:
    """Return an array of number nodes built from single-precision values."""
    return _array_of(create_number(_to_single(float(n))) for n in numbers)


def create_double_array(numbers: Iterable[float]) -> Node:
    """Return an array of number nodes built from double-precision values."""
    return _array_of(create_number(float(n)) for n in numbers)


def create_string_array(strings: Iterable[str]) -> Node:
    """Return an array of string nodes."""
    return _array_of(create_string(s) for s in strings)