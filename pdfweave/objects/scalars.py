"""Scalar PDF objects: numbers, booleans, null, names, strings and references."""

from __future__ import annotations

import math
from typing import Union

from ..features import Version
from .base import ObjectNumber, PdfObject

Number = Union[int, float]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _check_number(value: object) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected an int or float, got {type(value).__name__}")
    return value


class PdfNumberObject(PdfObject):
    """An integer or real number; the Python type decides which."""

    TYPE_NAME = "Number"

    def __init__(self, value: Number) -> None:
        self.value: Number = _check_number(value)

    def __repr__(self) -> str:
        return f"PdfNumberObject({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PdfNumberObject):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def set_value(self, value: Number) -> None:
        self.value = _check_number(value)

    def as_int(self) -> int:
        """The value as an integer; reals are truncated towards zero."""
        if isinstance(self.value, int):
            return self.value
        if math.isnan(self.value):
            return 0
        if math.isinf(self.value):
            return _I64_MAX if self.value > 0 else _I64_MIN
        return max(_I64_MIN, min(_I64_MAX, int(self.value)))

    def as_real(self) -> float:
        return float(self.value)

    def as_integer(self) -> int:
        return self.as_int()

    def as_float(self) -> float:
        return self.as_real()

    def encode_value(self, version: Version) -> bytes:
        if isinstance(self.value, int):
            return str(self.value).encode("ascii")
        text = f"{self.value:.4f}".rstrip("0").rstrip(".")
        return text.encode("ascii")


class PdfBooleanObject(PdfObject):
    """The keywords ``true`` and ``false``."""

    TYPE_NAME = "Boolean"

    def __init__(self, value: bool) -> None:
        self.value = bool(value)

    def __repr__(self) -> str:
        return f"PdfBooleanObject({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PdfBooleanObject):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def set(self, value: bool) -> None:
        self.value = bool(value)

    def encode_value(self, version: Version) -> bytes:
        return b"true" if self.value else b"false"


class PdfNullObject(PdfObject):
    """The null object, which encodes to nothing."""

    TYPE_NAME = "Null"

    def __repr__(self) -> str:
        return "PdfNullObject()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PdfNullObject):
            return NotImplemented
        return True

    __hash__ = None  # type: ignore[assignment]

    def encode_value(self, version: Version) -> bytes:
        return b""


def _escape_name(raw: bytes) -> bytes:
    """Escape '#' and every byte outside the printable range as #XX."""
    return b"".join(
        f"#{byte:02X}".encode("ascii")
        if byte == 0x23 or not 0x21 <= byte <= 0x7E
        else bytes((byte,))
        for byte in raw
    )


class PdfNameObject(PdfObject):
    """A name such as ``/Type``; the stored value is already escaped."""

    TYPE_NAME = "Name"

    def __init__(self, value: str | bytes) -> None:
        raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        self.value: bytes = _escape_name(raw)

    def __repr__(self) -> str:
        return f"PdfNameObject({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PdfNameObject):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def as_name(self) -> bytes:
        return self.value

    def encode_value(self, version: Version) -> bytes:
        return b"/" + self.value


_UTF16_BOM = b"\xfe\xff"
_UTF8_BOM = b"\xef\xbb\xbf"


def encode_text_string(string: str, version: Version) -> bytes:
    """Encode text as a literal string, or with a byte-order mark if not ASCII.

    Non-ASCII text is UTF-16BE before PDF 2.0 and UTF-8 from 2.0 on.
    """
    if string.isascii():
        escaped = "".join(f"\\{ch}" if ch in "\\()" else ch for ch in string)
        return b"(" + escaped.encode("ascii") + b")"
    if version >= Version.V2_2017:
        return _UTF8_BOM + string.encode("utf-8")
    return _UTF16_BOM + string.encode("utf-16-be")


class PdfStringObject(PdfObject):
    """A text string."""

    TYPE_NAME = "String"

    def __init__(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"PdfStringObject({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PdfStringObject):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def as_string(self) -> str:
        return self.value

    def encode_value(self, version: Version) -> bytes:
        return encode_text_string(self.value, version)


class PdfReferenceObject(PdfObject):
    """A reference ``N 0 R`` to an indirect object."""

    TYPE_NAME = "Reference"

    def __init__(self, object_number: ObjectNumber) -> None:
        self.object_number = object_number
        self._generation = 0

    def __repr__(self) -> str:
        return f"PdfReferenceObject({self.object_number!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PdfReferenceObject):
            return NotImplemented
        return self.object_number == other.object_number

    __hash__ = None  # type: ignore[assignment]

    def is_reference(self) -> bool:
        return True

    def encode_value(self, version: Version) -> bytes:
        return f"{self.object_number} {self._generation} R ".encode("ascii")