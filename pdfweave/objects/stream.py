"""Stream objects: a dictionary followed by a run of bytes."""

from __future__ import annotations

import zlib
from enum import Enum

from ..errors import CompressionError
from ..features import Version
from .base import PdfObject
from .containers import PdfDictionaryObject
from .scalars import PdfNameObject


class CompressionMethod(Enum):
    """How stream content is encoded when written."""

    NONE = "None"
    FLATE = "Flate"


class PdfStreamObject(PdfObject):
    """A stream: the stream dictionary plus content bytes.

    ``/Length`` is computed when the stream is encoded and must not be set
    in the dictionary beforehand.
    """

    TYPE_NAME = "Stream"

    def __init__(
        self,
        dictionary: PdfDictionaryObject | None = None,
        content: bytes = b"",
    ) -> None:
        self.dictionary = dictionary if dictionary is not None else PdfDictionaryObject()
        self.content = bytes(content)
        self.compression_method = CompressionMethod.NONE

    def __repr__(self) -> str:
        return (
            f"PdfStreamObject({self.dictionary!r}, {len(self.content)} bytes, "
            f"{self.compression_method.value})"
        )

    def compressed(self) -> PdfStreamObject:
        """Switch to Flate compression, adding ``/Filter /FlateDecode``."""
        self.dictionary.add("Filter", PdfNameObject("FlateDecode"))
        self.compression_method = CompressionMethod.FLATE
        return self

    def add(self, data: bytes) -> None:
        """Append bytes to the content."""
        self.content += bytes(data)

    def _encoded_content(self) -> bytes:
        if self.compression_method is CompressionMethod.FLATE:
            try:
                return zlib.compress(self.content)
            except zlib.error as exc:
                raise CompressionError(str(exc)) from exc
        return self.content

    def encode_value(self, version: Version) -> bytes:
        data = self._encoded_content()
        dictionary = PdfDictionaryObject()
        dictionary.values = list(self.dictionary.values)
        dictionary.add("Length", float(len(data)))
        return (
            dictionary.encode_value(version)
            + b"stream\n"
            + data
            + b"\nendstream\n"
        )