import pytest

from pdfweave.errors import StructureError
from pdfweave.features import Version
from pdfweave.function import (
    Function0Sampled,
    Function2Exponential,
    Function3Stitching,
    Function4PostScript,
    FunctionType,
    OrderType,
)
from pdfweave.objects.containers import PdfArrayObject


def _unit():
    return PdfArrayObject.from_floats([0.0, 1.0])


def _sampled(bits=8, code=b"\x00\x40\x80\xc0\xff"):
    return Function0Sampled(_unit(), _unit(), PdfArrayObject([5]), bits, code)


def test_sampled_dictionary():
    func = _sampled()
    dictionary = func.stream.dictionary
    assert dictionary.get_integer("FunctionType") == FunctionType.SAMPLED
    assert dictionary.get_integer("BitsPerSample") == 8
    assert dictionary.get("Domain").to_float_list() == [0.0, 1.0]
    assert func.stream.content == b"\x00\x40\x80\xc0\xff"


@pytest.mark.parametrize("bits", [1, 2, 4, 8, 12, 16, 24, 32])
def test_sampled_accepts_valid_bits(bits):
    assert _sampled(bits).stream.dictionary.get_integer("BitsPerSample") == bits


@pytest.mark.parametrize("bits", [0, 3, 7, 64])
def test_sampled_rejects_invalid_bits(bits):
    with pytest.raises(StructureError):
        _sampled(bits)


def test_sampled_encodes_with_length():
    encoded = _sampled(code=b"abcde").stream.encode_value(Version.V1_5)
    assert b"/Length 5" in encoded
    assert b"stream\nabcde\nendstream\n" in encoded


def test_sampled_options():
    func = (
        _sampled()
        .with_order(OrderType.CUBIC_SPLINE)
        .with_encode(PdfArrayObject([0, 4]))
        .with_decode(_unit())
    )
    dictionary = func.stream.dictionary
    assert dictionary.get_integer("Order") == OrderType.CUBIC_SPLINE
    assert dictionary.get("Encode").to_float_list() == [0.0, 4.0]
    assert "Decode" in dictionary


def test_sampled_order_twice_raises():
    func = _sampled().with_order(OrderType.LINEAR)
    with pytest.raises(StructureError):
        func.with_order(OrderType.LINEAR)


def test_exponential():
    func = (
        Function2Exponential(_unit(), 1.0)
        .with_range(_unit())
        .with_values_at_start(PdfArrayObject.from_floats([0.0, 0.0, 0.0]))
        .with_values_at_end(PdfArrayObject.from_floats([1.0, 0.5, 0.0]))
    )
    dictionary = func.dictionary
    assert dictionary.get_integer("FunctionType") == FunctionType.EXPONENTIAL
    assert dictionary.get("N").as_float() == 1.0
    assert dictionary.get("C1").to_float_list() == [1.0, 0.5, 0.0]
    assert "Range" in dictionary and "C0" in dictionary


def test_exponential_encoding():
    encoded = Function2Exponential(_unit(), 2.0).dictionary.encode_value(Version.V1_5)
    assert b"/FunctionType 2" in encoded
    assert b"/N 2" in encoded


def test_stitching():
    first = Function2Exponential(_unit(), 1.0)
    second = Function2Exponential(_unit(), 1.0)
    func = Function3Stitching(
        PdfArrayObject([first.dictionary, second.dictionary]),
        _unit(),
        PdfArrayObject.from_floats([0.5]),
        PdfArrayObject.from_floats([0.0, 1.0, 0.0, 1.0]),
    ).with_range(_unit())
    dictionary = func.dictionary
    assert dictionary.get_integer("FunctionType") == FunctionType.STITCHING
    assert len(dictionary.get("Functions")) == 2
    assert dictionary.get("Bounds").to_float_list() == [0.5]
    assert "Range" in dictionary


def test_postscript():
    code = b"{ 360 mul sin }"
    func = Function4PostScript(_unit(), _unit(), code)
    dictionary = func.stream.dictionary
    assert dictionary.get_integer("FunctionType") == FunctionType.POSTSCRIPT
    assert func.stream.content == code
    encoded = func.stream.encode_value(Version.V1_5)
    assert f"/Length {len(code)}".encode() in encoded