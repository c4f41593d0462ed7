"""The document information dictionary."""

from __future__ import annotations

from enum import Enum

from .objects.containers import PdfDictionaryObject
from .objects.scalars import PdfStringObject


class TrappedState(Enum):
    """Whether the document has been trapped."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"

    def as_name(self) -> str:
        return self.value


class Metadata:
    """Document information entries, each stored as a string.

    Each ``with_*`` method adds an entry and returns the metadata; setting
    the same entry twice raises StructureError.
    """

    def __init__(self) -> None:
        self.dictionary = PdfDictionaryObject()

    def _add(self, key: str, value: str) -> Metadata:
        self.dictionary.add(key, PdfStringObject(value))
        return self

    def with_title(self, title: str) -> Metadata:
        return self._add("Title", title)

    def with_author(self, author: str) -> Metadata:
        return self._add("Author", author)

    def with_subject(self, subject: str) -> Metadata:
        return self._add("Subject", subject)

    def with_keywords(self, keywords: str) -> Metadata:
        return self._add("Keywords", keywords)

    def with_creator(self, creator: str) -> Metadata:
        return self._add("Creator", creator)

    def with_producer(self, producer: str) -> Metadata:
        return self._add("Producer", producer)

    def with_creation_date(self, date: str) -> Metadata:
        return self._add("CreationDate", date)

    def with_mod_date(self, date: str) -> Metadata:
        return self._add("ModDate", date)

    def with_trapped(self, trapped: TrappedState) -> Metadata:
        return self._add("Trapped", trapped.as_name())

    def is_empty(self) -> bool:
        return len(self.dictionary) == 0