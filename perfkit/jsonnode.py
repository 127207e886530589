"""In-memory JSON tree: node types, child lookup and in-place editing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterator

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class JsonType(IntFlag):
    """Kind of value a node holds."""

    INVALID = 0
    FALSE = 1 << 0
    TRUE = 1 << 1
    NULL = 1 << 2
    NUMBER = 1 << 3
    STRING = 1 << 4
    ARRAY = 1 << 5
    OBJECT = 1 << 6
    RAW = 1 << 7


def _saturate(number: float) -> int:
    """Truncate a float to a signed 64-bit integer, clamping at the limits."""
    if math.isnan(number):
        return 0
    if number >= _INT64_MAX:
        return _INT64_MAX
    if number <= _INT64_MIN:
        return _INT64_MIN
    return int(number)


def _names_match(wanted: str, name: str | None, case_sensitive: bool) -> bool:
    if name is None:
        return False
    if case_sensitive:
        return wanted == name
    return wanted.translate(_ASCII_LOWER) == name.translate(_ASCII_LOWER)


@dataclass(eq=False)
class Node:
    """A JSON value; arrays and objects hold their members in ``children``.

    Object members carry their key in ``name``. A reference node shares the
    string and children of the node it was made from.
    """

    type: JsonType = JsonType.INVALID
    value_string: str | None = None
    value_int: int = 0
    value_double: float = 0.0
    name: str | None = None
    children: list[Node] = field(default_factory=list)
    is_reference: bool = False

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Node:
        if index < 0 or index >= len(self.children):
            raise IndexError(f"index {index} out of range")
        return self.children[index]

    # lookup

    def get_item(self, name: str, case_sensitive: bool = False) -> Node | None:
        """Return the first member called ``name``, or None."""
        for child in self.children:
            if _names_match(name, child.name, case_sensitive):
                return child
        return None

    def has_item(self, name: str) -> bool:
        """Whether a member called ``name`` exists (ASCII case-insensitive)."""
        return self.get_item(name) is not None

    # adding

    def append(self, item: Node) -> None:
        """Add ``item`` at the end of the children."""
        self.children.append(item)

    def add(self, name: str, item: Node) -> None:
        """Add ``item`` as an object member called ``name``."""
        item.name = name
        self.children.append(item)

    @staticmethod
    def _reference_to(item: Node) -> Node:
        return Node(
            type=item.type,
            value_string=item.value_string,
            value_int=item.value_int,
            value_double=item.value_double,
            name=None,
            children=item.children,
            is_reference=True,
        )

    def append_reference(self, item: Node) -> Node:
        """Append a reference to ``item`` and return the reference."""
        ref = self._reference_to(item)
        self.append(ref)
        return ref

    def add_reference(self, name: str, item: Node) -> Node:
        """Add a reference to ``item`` as member ``name`` and return it."""
        ref = self._reference_to(item)
        self.add(name, ref)
        return ref

    # removing

    def _position_of(self, item: Node) -> int:
        for position, child in enumerate(self.children):
            if child is item:
                return position
        raise ValueError("item is not a child of this node")

    def detach(self, item: Node) -> Node:
        """Remove ``item`` from the children and return it."""
        del self.children[self._position_of(item)]
        return item

    def detach_index(self, index: int) -> Node:
        """Remove and return the child at ``index``."""
        return self.detach(self[index])

    def _require(self, name: str, case_sensitive: bool) -> Node:
        found = self.get_item(name, case_sensitive)
        if found is None:
            raise KeyError(name)
        return found

    def detach_name(self, name: str, case_sensitive: bool = False) -> Node:
        """Remove and return the member called ``name``."""
        return self.detach(self._require(name, case_sensitive))

    def remove_index(self, index: int) -> None:
        """Discard the child at ``index``."""
        self.detach_index(index)

    def remove_name(self, name: str, case_sensitive: bool = False) -> None:
        """Discard the member called ``name``."""
        self.detach_name(name, case_sensitive)

    # editing

    def insert(self, index: int, item: Node) -> None:
        """Insert ``item`` before position ``index``; past the end it appends."""
        if index < 0:
            raise IndexError(f"index {index} out of range")
        self.children.insert(index, item)

    def replace(self, item: Node, replacement: Node) -> None:
        """Put ``replacement`` where the child ``item`` is."""
        if replacement is item:
            return
        self.children[self._position_of(item)] = replacement

    def replace_index(self, index: int, replacement: Node) -> None:
        """Put ``replacement`` at position ``index``."""
        self.replace(self[index], replacement)

    def replace_name(
        self, name: str, replacement: Node, case_sensitive: bool = False
    ) -> None:
        """Put ``replacement`` in place of the member called ``name``."""
        self.replace(self._require(name, case_sensitive), replacement)

    def set_number(self, number: float) -> float:
        """Store ``number`` as both float and saturated integer; return it."""
        self.value_int = _saturate(number)
        self.value_double = float(number)
        return self.value_double

    # type checks

    def _kind(self) -> int:
        return int(self.type) & 0xFF

    def is_invalid(self) -> bool:
        return self._kind() == JsonType.INVALID

    def is_false(self) -> bool:
        return self._kind() == JsonType.FALSE

    def is_true(self) -> bool:
        return self._kind() == JsonType.TRUE

    def is_bool(self) -> bool:
        return (int(self.type) & (JsonType.TRUE | JsonType.FALSE)) != 0

    def is_null(self) -> bool:
        return self._kind() == JsonType.NULL

    def is_number(self) -> bool:
        return self._kind() == JsonType.NUMBER

    def is_string(self) -> bool:
        return self._kind() == JsonType.STRING

    def is_array(self) -> bool:
        return self._kind() == JsonType.ARRAY

    def is_object(self) -> bool:
        return self._kind() == JsonType.OBJECT

    def is_raw(self) -> bool:
        return self._kind() == JsonType.RAW