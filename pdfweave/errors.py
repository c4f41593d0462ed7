"""Exception hierarchy for PDF construction and serialisation."""

from __future__ import annotations


class PdfError(Exception):
    """Base class for every error raised by the package."""

    prefix = ""

    def __init__(self, message: str = "") -> None:
        self.message = message
        text = f"{self.prefix}: {message}" if self.prefix else message
        super().__init__(text)


class InvalidObjectReferenceError(PdfError):
    """An object number that does not name a known object."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Invalid object reference: {number}")


class InvalidArgumentError(PdfError):
    prefix = "Invalid argument"


class CompressionError(PdfError):
    prefix = "Compression error"


class CrossRefError(PdfError):
    prefix = "Cross-reference table error"


class InvalidColorValueError(PdfError):
    """A colour component outside the closed range 0.0 to 1.0."""

    def __init__(self, val: float) -> None:
        self.val = val
        super().__init__(f"color value {val} not in range 0.0..=1.0")


class InvalidFontError(PdfError):
    prefix = "Invalid font"


class InvalidFunctionSpecificationError(PdfError):
    """A function dictionary that does not describe a valid function."""

    def __init__(self) -> None:
        super().__init__("Invalid function specification")


class InvalidImageError(PdfError):
    prefix = "Invalid image"


class StructureError(PdfError):
    prefix = "PDF structure error"


class SerializeError(PdfError):
    prefix = "Serialization error"


class StreamError(PdfError):
    prefix = "Stream error"