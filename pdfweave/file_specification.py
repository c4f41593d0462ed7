"""File specification dictionaries."""

from __future__ import annotations

from dataclasses import dataclass, field

from .objects.containers import PdfArrayObject, PdfDictionaryObject
from .objects.scalars import PdfNameObject


@dataclass
class EmbeddedFileStreams:
    """The dictionary of embedded file streams for a file specification."""

    dictionary: PdfDictionaryObject = field(default_factory=PdfDictionaryObject)


@dataclass
class RelatedFileStreams:
    """The dictionary of related file arrays for a file specification."""

    dictionary: PdfDictionaryObject = field(default_factory=PdfDictionaryObject)


@dataclass
class CollectionItems:
    """The collection item dictionary for a file specification."""

    dictionary: PdfDictionaryObject = field(default_factory=PdfDictionaryObject)


class FileSpecification:
    """A ``/Type /FileSpec`` dictionary built one entry at a time.

    Each ``with_*`` method adds an entry and returns the specification;
    adding a key twice raises StructureError.
    """

    def __init__(self) -> None:
        self.dictionary = PdfDictionaryObject().typed("FileSpec")

    def _add(self, key: str, value: object) -> FileSpecification:
        self.dictionary.add(key, value)
        return self

    def with_name(self, name: str) -> FileSpecification:
        return self._add("FS", PdfNameObject(name))

    def with_spec_string(self, spec: str) -> FileSpecification:
        return self._add("F", spec)

    def with_doc_encoding(self, encoding: str) -> FileSpecification:
        return self._add("UF", encoding)

    def with_dos_name(self, dos_name: str) -> FileSpecification:
        return self._add("EF", dos_name)

    def with_mac_name(self, mac_name: str) -> FileSpecification:
        return self._add("Mac", mac_name)

    def with_unix_name(self, unix_name: str) -> FileSpecification:
        return self._add("Unix", unix_name)

    def with_id(self, id1: str, id2: str) -> FileSpecification:
        return self._add("ID", PdfArrayObject([id1, id2]))

    def with_volatile(self, volatile: bool) -> FileSpecification:
        return self._add("V", bool(volatile))

    def with_embedded_file_streams(
        self, streams: EmbeddedFileStreams
    ) -> FileSpecification:
        return self._add("EF", streams.dictionary)

    def with_related_file_streams(
        self, streams: RelatedFileStreams
    ) -> FileSpecification:
        return self._add("RF", streams.dictionary)

    def with_description(self, description: str) -> FileSpecification:
        return self._add("Desc", description)

    def with_collection_items(self, items: CollectionItems) -> FileSpecification:
        return self._add("Collection", items.dictionary)