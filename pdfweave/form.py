"""Form dictionaries."""

from __future__ import annotations

from .objects.containers import PdfDictionaryObject


class Form:
    """A form dictionary built one entry at a time."""

    def __init__(self) -> None:
        self.dictionary = PdfDictionaryObject()

    def with_type(self, type_name: str) -> Form:
        """Add a ``/Type`` entry holding ``type_name`` as a string."""
        self.dictionary.add("Type", type_name)
        return self