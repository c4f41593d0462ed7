"""Object numbering and the common base of every PDF object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, ClassVar, TypeVar

from ..errors import StructureError
from ..features import Version

_T = TypeVar("_T", bound="PdfObject")


@dataclass(frozen=True, order=True)
class ObjectNumber:
    """The number that identifies an indirect object."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


class ObjectNumberAllocator:
    """Hands out object numbers in sequence; 0 is reserved as the free root."""

    def __init__(self) -> None:
        self._last = ObjectNumber(0)

    def last_object_number(self) -> ObjectNumber:
        return self._last

    def next_object_number(self) -> ObjectNumber:
        self._last = ObjectNumber(self._last.value + 1)
        return self._last


def write_indirect_object(
    object_number: ObjectNumber, encoded: bytes, file: BinaryIO
) -> int:
    """Write ``encoded`` as an ``N 0 obj`` block and return its byte offset."""
    offset = file.tell()
    file.write(f"{object_number} 0 obj\n".encode("ascii") + encoded + b"endobj\n\n")
    return offset


class PdfObject(ABC):
    """Base of all PDF objects; an object with a number is indirect."""

    TYPE_NAME: ClassVar[str] = "Object"

    object_number: ObjectNumber | None = None
    generation_number: int | None = None

    def type_name(self) -> str:
        return self.TYPE_NAME

    @abstractmethod
    def encode_value(self, version: Version) -> bytes:
        """The object's own syntax, regardless of whether it is indirect."""

    def encode(self, version: Version) -> bytes:
        """The syntax used where this object appears as a value."""
        if self.object_number is not None and not self.is_reference():
            return f"{self.object_number} 0 R ".encode("ascii")
        return self.encode_value(version)

    def serialize(
        self, version: Version, file: BinaryIO
    ) -> list[tuple[ObjectNumber, int]]:
        """Write this object as an indirect object.

        Returns the (object number, offset) pairs written; direct objects
        and references write nothing.
        """
        if self.is_reference() or self.is_direct():
            return []
        assert self.object_number is not None
        offset = write_indirect_object(
            self.object_number, self.encode_value(version), file
        )
        return [(self.object_number, offset)]

    def is_indirect(self) -> bool:
        return self.object_number is not None

    def is_direct(self) -> bool:
        return not self.is_indirect()

    def is_reference(self) -> bool:
        return False

    def with_object_number(self: _T, number: ObjectNumber) -> _T:
        self.object_number = number
        return self

    def _unexpected_type(self) -> StructureError:
        return StructureError(f"Unexpected type: {self.type_name()}")

    def as_integer(self) -> int:
        raise self._unexpected_type()

    def as_float(self) -> float:
        raise self._unexpected_type()

    def as_float_list(self) -> list[float]:
        raise self._unexpected_type()

    def as_string(self) -> str:
        raise self._unexpected_type()

    def as_name(self) -> bytes:
        raise self._unexpected_type()

    def as_dict(self) -> PdfObject:
        raise self._unexpected_type()