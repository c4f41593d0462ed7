"""PDF function objects: sampled, exponential, stitching and PostScript."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .errors import StructureError
from .objects.containers import PdfDictionaryObject
from .objects.stream import PdfStreamObject

_VALID_BITS_PER_SAMPLE = frozenset({1, 2, 4, 8, 12, 16, 24, 32})


class FunctionType(IntEnum):
    SAMPLED = 0
    EXPONENTIAL = 2
    STITCHING = 3
    POSTSCRIPT = 4


class OrderType(IntEnum):
    """Interpolation order of a sampled function."""

    LINEAR = 1
    CUBIC_SPLINE = 3


def _function_dict(func_type: FunctionType, domain: Any) -> PdfDictionaryObject:
    dictionary = PdfDictionaryObject()
    dictionary.add("FunctionType", int(func_type))
    dictionary.add("Domain", domain)
    return dictionary


class Function0Sampled:
    """A type 0 function: a table of samples held in a stream.

    The stream's ``/Length`` is set when the stream is encoded.
    """

    def __init__(
        self,
        domain: Any,
        range_: Any,
        size: Any,
        bits_per_sample: int,
        code: bytes,
    ) -> None:
        dictionary = _function_dict(FunctionType.SAMPLED, domain)
        dictionary.add("Size", size)
        dictionary.add("Range", range_)
        if bits_per_sample not in _VALID_BITS_PER_SAMPLE:
            raise StructureError(
                "BitsPerSample must be 1, 2, 4, 8, 12, 16, 24, or 32, "
                f"got {bits_per_sample}"
            )
        dictionary.add("BitsPerSample", int(bits_per_sample))
        self.stream = PdfStreamObject(dictionary, bytes(code))

    def with_order(self, order: OrderType) -> Function0Sampled:
        self.stream.dictionary.add("Order", int(order))
        return self

    def with_encode(self, encode: Any) -> Function0Sampled:
        self.stream.dictionary.add("Encode", encode)
        return self

    def with_decode(self, decode: Any) -> Function0Sampled:
        self.stream.dictionary.add("Decode", decode)
        return self


class Function2Exponential:
    """A type 2 function: exponential interpolation between C0 and C1."""

    def __init__(self, domain: Any, interpolation_exponent: float) -> None:
        self.dictionary = _function_dict(FunctionType.EXPONENTIAL, domain)
        self.dictionary.add("N", float(interpolation_exponent))

    def with_range(self, range_: Any) -> Function2Exponential:
        self.dictionary.add("Range", range_)
        return self

    def with_values_at_start(self, values: Any) -> Function2Exponential:
        self.dictionary.add("C0", values)
        return self

    def with_values_at_end(self, values: Any) -> Function2Exponential:
        self.dictionary.add("C1", values)
        return self


class Function3Stitching:
    """A type 3 function: sub-functions joined over adjacent subdomains."""

    def __init__(self, functions: Any, domain: Any, bounds: Any, encode: Any) -> None:
        self.dictionary = _function_dict(FunctionType.STITCHING, domain)
        self.dictionary.add("Functions", functions)
        self.dictionary.add("Bounds", bounds)
        self.dictionary.add("Encode", encode)

    def with_range(self, range_: Any) -> Function3Stitching:
        self.dictionary.add("Range", range_)
        return self


class Function4PostScript:
    """A type 4 function: a PostScript calculator program in a stream."""

    def __init__(self, domain: Any, range_: Any, code: bytes) -> None:
        dictionary = _function_dict(FunctionType.POSTSCRIPT, domain)
        dictionary.add("Range", range_)
        self.stream = PdfStreamObject(dictionary, bytes(code))