"""Named object types identified by a checksum of their name."""

from __future__ import annotations

import functools

_BASE = 65521
_NMAX = 5552
_BLOCK = 16
_MASK = 0xFFFFFFFF


def _lower(byte: int) -> int:
    if 0x41 <= byte <= 0x5A:
        return byte + 0x20
    return byte


def hash_name(type_name: str | None) -> int:
    """Return the 32-bit checksum identifying ``type_name``.

    Whole 16-byte blocks are folded to lower case before summing; the
    trailing bytes of each run are summed as they are. ``None`` hashes to 0.
    """
    if type_name is None:
        return 0
    data = type_name.encode("utf-8")
    s1 = 0
    s2 = 0
    pos = 0
    remaining = len(data)
    while remaining > 0:
        k = min(remaining, _NMAX)
        remaining -= k
        while k >= _BLOCK:
            for byte in data[pos:pos + _BLOCK]:
                s1 = (s1 + _lower(byte)) & _MASK
                s2 = (s2 + s1) & _MASK
            pos += _BLOCK
            k -= _BLOCK
        if k:
            for byte in data[pos:pos + k]:
                s1 = (s1 + byte) & _MASK
                s2 = (s2 + s1) & _MASK
            pos += k
            s1 %= _BASE
            s2 %= _BASE
    return ((s2 << 16) | s1) & _MASK


@functools.total_ordering
class GameObjectType:
    """A type name together with the identifier derived from it."""

    __slots__ = ("type_name", "type_id")

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        self.type_id = hash_name(type_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameObjectType):
            return NotImplemented
        return self.type_id == other.type_id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GameObjectType):
            return NotImplemented
        return self.type_id < other.type_id

    def __hash__(self) -> int:
        return hash(self.type_id)

    def __repr__(self) -> str:
        return f"GameObjectType({self.type_name!r})"