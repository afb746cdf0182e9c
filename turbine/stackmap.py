"""Stack and global slot maps recording which slots hold object references."""

from __future__ import annotations

from dataclasses import dataclass, field

SLOT_COUNT = 64

_REF = "*"
_NON_REF = "-"
_UNMARKED = "."


def _check_slot(slot: int) -> None:
    if not 0 <= slot < SLOT_COUNT:
        raise IndexError(f"slot {slot} is out of range [0, {SLOT_COUNT})")


def _new_slots() -> list[str]:
    return [_UNMARKED] * SLOT_COUNT


def _mark(slots: list[str], slot: int, is_ref: bool) -> None:
    _check_slot(slot)
    slots[slot] = _REF if is_ref else _NON_REF


@dataclass
class StackMapEntry:
    """The reference layout of the stack slots at one code address."""

    addr: int = 0
    slots: list[str] = field(default_factory=_new_slots)

    def is_ref(self, slot: int) -> bool:
        _check_slot(slot)
        return self.slots[slot] == _REF

    def format(self) -> str:
        """One line: the address, then a mark per slot ('*', '-' or '.')."""
        return f"[{self.addr:6d}] " + "".join(self.slots)


@dataclass
class StackMap:
    """A working entry being filled in, plus the entries recorded so far."""

    current: StackMapEntry = field(default_factory=StackMapEntry)
    records: list[StackMapEntry] = field(default_factory=list)

    def mark(self, slot: int, is_ref: bool) -> None:
        _mark(self.current.slots, slot, is_ref)

    def push_current(self, addr: int) -> None:
        """Record a snapshot of the current slots at ``addr``."""
        self.records.append(StackMapEntry(addr, list(self.current.slots)))

    def find_entry(self, addr: int) -> StackMapEntry:
        """Return the entry at ``addr``, or the last one recorded before it.

        Raises LookupError when there is no entry at or before ``addr``.
        """
        previous = None
        for entry in self.records:
            if entry.addr == addr:
                return entry
            if entry.addr > addr:
                break
            previous = entry
        if previous is None:
            raise LookupError(f"no stack map entry at or before address {addr}")
        return previous

    def reset_current(self) -> None:
        self.current.slots = _new_slots()

    def format(self) -> str:
        return "".join(entry.format() + "\n" for entry in self.records)


@dataclass
class GlobalMap:
    """The reference layout of the global slots."""

    slots: list[str] = field(default_factory=_new_slots)

    def mark(self, slot: int, is_ref: bool) -> None:
        _mark(self.slots, slot, is_ref)

    def is_ref(self, slot: int) -> bool:
        _check_slot(slot)
        return self.slots[slot] == _REF

    def format(self) -> str:
        return "".join(self.slots)