"""Arrays, dictionaries and the conversion of plain values to PDF objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, BinaryIO

from ..errors import StructureError
from ..features import Version
from .base import ObjectNumber, PdfObject, write_indirect_object
from .scalars import (
    PdfBooleanObject,
    PdfNameObject,
    PdfNullObject,
    PdfNumberObject,
    PdfReferenceObject,
    PdfStringObject,
)


def to_pdf_object(value: Any) -> PdfObject:
    """Convert a plain Python value to the matching PDF object.

    PDF objects pass through unchanged; ``bool`` becomes a boolean, ``int``
    and ``float`` numbers, ``str`` a text string, ``ObjectNumber`` a
    reference, ``None`` null, and a list or tuple an array.
    """
    if isinstance(value, PdfObject):
        return value
    if isinstance(value, bool):
        return PdfBooleanObject(value)
    if isinstance(value, (int, float)):
        return PdfNumberObject(value)
    if isinstance(value, str):
        return PdfStringObject(value)
    if isinstance(value, ObjectNumber):
        return PdfReferenceObject(value)
    if value is None:
        return PdfNullObject()
    if isinstance(value, (list, tuple)):
        return PdfArrayObject(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a PDF object")


def num(value: int | float) -> PdfNumberObject:
    """A number object."""
    return PdfNumberObject(value)


def num_or_null(value: int | float | None) -> PdfObject:
    """A number object, or null when ``value`` is None."""
    return PdfNullObject() if value is None else PdfNumberObject(value)


def name(value: str | bytes) -> PdfNameObject:
    """A name object such as ``/Type``."""
    return PdfNameObject(value)


def string(value: str) -> PdfStringObject:
    """A string object."""
    return PdfStringObject(value)


def text(value: str) -> PdfStringObject:
    """A text string object."""
    return PdfStringObject(value)


class PdfArrayObject(PdfObject):
    """An ordered sequence of PDF objects."""

    TYPE_NAME = "Array"

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self.values: list[PdfObject] = [to_pdf_object(v) for v in values or ()]

    @classmethod
    def from_floats(cls, values: Iterable[float]) -> PdfArrayObject:
        """An array of real numbers."""
        return cls(float(v) for v in values)

    def __repr__(self) -> str:
        return f"PdfArrayObject({self.values!r})"

    def push(self, value: Any) -> None:
        self.values.append(to_pdf_object(value))

    def to_float_list(self) -> list[float]:
        """Every element as a float; raises StructureError on a non-number."""
        return [v.as_float() for v in self.values]

    def as_float_list(self) -> list[float]:
        return self.to_float_list()

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[PdfObject]:
        return iter(self.values)

    def encode_value(self, version: Version) -> bytes:
        parts = [b"[ "]
        for value in self.values:
            parts.append(value.encode(version))
            parts.append(b" ")
        parts.append(b"]")
        return b"".join(parts)


class PdfDictionaryObject(PdfObject):
    """Key/value pairs with name keys, kept in insertion order."""

    TYPE_NAME = "Dictionary"

    def __init__(self) -> None:
        self.values: list[tuple[PdfNameObject, PdfObject]] = []
        self.children: list[PdfDictionaryObject] = []

    def __repr__(self) -> str:
        return f"PdfDictionaryObject({self.values!r})"

    def typed(self, name: str) -> PdfDictionaryObject:
        """Add a ``/Type`` entry and return the dictionary."""
        self.add("Type", PdfNameObject(name))
        return self

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def _index(self, key: str) -> int | None:
        wanted = PdfNameObject(key).value
        return next(
            (i for i, (k, _) in enumerate(self.values) if k.value == wanted), None
        )

    def get(self, key: str) -> PdfObject | None:
        index = self._index(key)
        return None if index is None else self.values[index][1]

    def _require(self, key: str) -> PdfObject:
        value = self.get(key)
        if value is None:
            raise StructureError(f"Key '{key}' not found")
        return value

    @staticmethod
    def _type_error(key: str, value: PdfObject) -> StructureError:
        return StructureError(
            f"Unexpected type for key '{key}': found {value.type_name()}"
        )

    def push_to_array(self, key: str, value: Any) -> None:
        """Append ``value`` to the array stored under ``key``."""
        target = self.get(key)
        if not isinstance(target, PdfArrayObject):
            raise StructureError(f"Key '{key}' is not an array")
        target.push(value)

    def get_integer(self, key: str) -> int:
        value = self._require(key)
        if not isinstance(value, PdfNumberObject):
            raise self._type_error(key, value)
        return value.as_int()

    def get_string(self, key: str) -> str:
        value = self._require(key)
        if not isinstance(value, PdfStringObject):
            raise self._type_error(key, value)
        return value.value

    def get_name(self, key: str) -> bytes:
        value = self._require(key)
        if not isinstance(value, PdfNameObject):
            raise self._type_error(key, value)
        return value.value

    def get_dict(self, key: str) -> PdfDictionaryObject:
        value = self._require(key)
        if not isinstance(value, PdfDictionaryObject):
            raise self._type_error(key, value)
        return value

    def as_dict(self) -> PdfDictionaryObject:
        return self

    def update_or_add(self, key: str, value: Any) -> None:
        """Replace the value under ``key``, or add it if absent."""
        obj = to_pdf_object(value)
        index = self._index(key)
        if index is None:
            self.values.append((PdfNameObject(key), obj))
        else:
            self.values[index] = (self.values[index][0], obj)

    def add(self, key: str, value: Any) -> None:
        """Add a new entry; raises StructureError if the key exists."""
        if key in self:
            raise StructureError(
                f"add: Attempt to make duplicate key {key} in dictionary"
            )
        self.values.append((PdfNameObject(key), to_pdf_object(value)))

    def add_child(self, child: PdfDictionaryObject) -> None:
        """Attach a dictionary written after this one, as in a page tree."""
        self.children.append(child)

    def serialize(
        self, version: Version, file: BinaryIO
    ) -> list[tuple[ObjectNumber, int]]:
        """Write this dictionary, its indirect values and its children.

        Returns the (object number, offset) pairs of everything written.
        """
        if self.object_number is None:
            raise StructureError("cannot serialize a dictionary without an object number")
        written = [
            (
                self.object_number,
                write_indirect_object(
                    self.object_number, self.encode_value(version), file
                ),
            )
        ]
        for _, value in self.values:
            if value.is_indirect():
                written.extend(value.serialize(version, file))
        for child in self.children:
            written.extend(child.serialize(version, file))
        return written

    def encode_value(self, version: Version) -> bytes:
        parts = [b"<<\n"]
        for key, value in self.values:
            parts.append(key.encode(version))
            parts.append(b" ")
            parts.append(value.encode(version))
            parts.append(b"\n")
        parts.append(b">>\n")
        return b"".join(parts)