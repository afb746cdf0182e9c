"""Table of struct layouts known to generated code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class CodeStruct:
    """A struct layout: its id, name and the value type of each field."""

    id: int
    field_count: int
    fullname: str
    val_types: list[int] = field(default_factory=list)

    def push_value_type(self, val_type: int) -> None:
        self.val_types.append(val_type)

    def value_type(self, field_id: int) -> int:
        if not 0 <= field_id < len(self.val_types):
            raise IndexError(f"field {field_id} is out of range")
        return self.val_types[field_id]


class StructTable:
    """Structs indexed by their ids, which are assigned in order from 0."""

    def __init__(self) -> None:
        self._structs: list[CodeStruct] = []

    def push(self, fullname: str, field_count: int) -> int:
        """Add a struct and return its new id."""
        new_id = len(self._structs)
        self._structs.append(CodeStruct(new_id, field_count, fullname))
        return new_id

    def lookup(self, struct_id: int) -> CodeStruct | None:
        """Return the struct with ``struct_id``, or None if there is none."""
        if not 0 <= struct_id < len(self._structs):
            return None
        return self._structs[struct_id]

    def __len__(self) -> int:
        return len(self._structs)

    def __iter__(self) -> Iterator[CodeStruct]:
        return iter(self._structs)