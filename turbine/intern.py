"""String interning with an open-addressing table."""

from __future__ import annotations

import struct

_MAX_LOAD_FACTOR = 70
_INIT_SIZE = 256
_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def _fnv_hash(key: str) -> int:
    hash_ = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        hash_ ^= signed & _MASK64
        hash_ = (hash_ * _FNV_PRIME) & _MASK64
    return hash_


class InternTable:
    """Keeps one canonical copy of each distinct string."""

    def __init__(self) -> None:
        self._buckets: list[str | None] = []
        self._occupied = 0

    def _probe(self, key: str) -> tuple[int | None, str | None]:
        """Return (free position, None) or (None, stored string) for ``key``."""
        capacity = len(self._buckets)
        hash_ = _fnv_hash(key)
        for i in range(capacity):
            pos = (hash_ + i) % capacity
            entry = self._buckets[pos]
            if entry is None:
                return pos, None
            if entry == key:
                return None, entry
        return None, None

    def _insert(self, key: str) -> str | None:
        pos, existing = self._probe(key)
        if existing is not None:
            return existing
        if pos is None:
            return None
        self._buckets[pos] = key
        self._occupied += 1
        return key

    def _rehash(self) -> None:
        old_buckets = self._buckets
        capacity = len(old_buckets)
        new_capacity = _INIT_SIZE if capacity < _INIT_SIZE else 2 * capacity
        self._buckets = [None] * new_capacity
        self._occupied = 0
        for entry in old_buckets:
            if entry is not None:
                self._insert(entry)

    def intern(self, text: str | None) -> str | None:
        """Return the canonical copy of ``text``, storing it if new."""
        if text is None:
            return None
        if 100 * self._occupied >= _MAX_LOAD_FACTOR * len(self._buckets):
            self._rehash()
        return self._insert(text)

    def __len__(self) -> int:
        return self._occupied

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str) or not self._buckets:
            return False
        return self._probe(text)[1] is not None

    def format(self) -> str:
        """List the occupied buckets and a summary line of occupancy."""
        lines = [
            f'{pos:4d}: "{entry}"'
            for pos, entry in enumerate(self._buckets)
            if entry is not None
        ]
        capacity = len(self._buckets)
        if capacity:
            ratio = struct.unpack("f", struct.pack("f", self._occupied / capacity))[0]
        else:
            ratio = float("nan")
        lines.append(f"buckets {self._occupied}/{capacity}: {ratio:g}% occupied")
        return "\n".join(lines) + "\n"