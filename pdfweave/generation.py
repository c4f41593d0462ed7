"""Generation numbers and cross-reference entry status."""

from __future__ import annotations

from enum import Enum

ROOT_GENERATION = 65535
"""Generation number required for the free object 0."""


class Generation(Enum):
    """Generation of an object: the root free object or a normal one."""

    ROOT = ROOT_GENERATION
    NORMAL = 0

    def as_int(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class ObjectStatus(Enum):
    """Whether a cross-reference entry is free or in use."""

    FREE = "f"
    IN_USE = "n"

    def as_char(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value