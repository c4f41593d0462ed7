import io

import pytest

from pdfweave.errors import StructureError
from pdfweave.features import Version
from pdfweave.objects.base import ObjectNumber
from pdfweave.objects.containers import (
    PdfArrayObject,
    PdfDictionaryObject,
    name,
    num,
    num_or_null,
    string,
    text,
    to_pdf_object,
)
from pdfweave.objects.scalars import (
    PdfBooleanObject,
    PdfNullObject,
    PdfNumberObject,
    PdfReferenceObject,
    PdfStringObject,
)

V = Version.V1_5


# ---- arrays -------------------------------------------------------------


def test_encode_empty_array():
    assert PdfArrayObject().encode(V) == b"[ ]"


def test_encode_single_element():
    arr = PdfArrayObject()
    arr.push(42)
    assert arr.encode(V) == b"[ 42 ]"


def test_encode_mixed_elements():
    arr = PdfArrayObject()
    arr.push(549)
    arr.push(3.14)
    arr.push(False)
    assert arr.encode(V) == b"[ 549 3.14 false ]"


def test_encode_with_name():
    arr = PdfArrayObject()
    arr.push(name("SomeName"))
    assert arr.encode(V) == b"[ /SomeName ]"


def test_encode_with_indirect_reference():
    arr = PdfArrayObject()
    arr.push(PdfReferenceObject(ObjectNumber(10)))
    assert arr.encode(V) == b"[ 10 0 R  ]"


def test_from_floats_and_to_float_list():
    arr = PdfArrayObject.from_floats([1, 2.5, 0])
    assert arr.to_float_list() == [1.0, 2.5, 0.0]
    assert arr.as_float_list() == [1.0, 2.5, 0.0]
    assert len(arr) == 3


def test_to_float_list_rejects_non_numbers():
    arr = PdfArrayObject([1, "text"])
    with pytest.raises(StructureError, match="Unexpected type: String"):
        arr.to_float_list()


def test_iteration_yields_pdf_objects():
    arr = PdfArrayObject([1, True, None])
    items = list(arr)
    assert [type(i) for i in items] == [PdfNumberObject, PdfBooleanObject, PdfNullObject]


def test_indirect_array_encodes_as_reference():
    arr = PdfArrayObject([1]).with_object_number(ObjectNumber(7))
    assert arr.encode(V) == b"7 0 R "
    assert arr.encode_value(V) == b"[ 1 ]"


# ---- dictionaries -------------------------------------------------------


def test_dictionary_methods():
    d = PdfDictionaryObject()
    assert len(d) == 0
    d.add("Key1", name("Value1"))
    assert len(d) == 1
    assert "Key1" in d
    assert "Key2" not in d
    d.add("Key2", name("Value2"))
    assert len(d) == 2
    assert "Key2" in d


def test_encode_empty_dictionary():
    assert PdfDictionaryObject().encode(V) == b"<<\n>>\n"


def test_encode_single_entry():
    d = PdfDictionaryObject()
    d.add("Type", name("Catalog"))
    out = d.encode(V).decode()
    assert out.startswith("<<\n")
    assert "/Type /Catalog" in out
    assert out.endswith(">>\n")


def test_encode_multiple_entries():
    d = PdfDictionaryObject()
    d.add("Type", name("Page"))
    d.add("Count", num(3))
    out = d.encode(V).decode()
    assert "/Type /Page" in out
    assert "/Count 3" in out


def test_encode_with_boolean_value():
    d = PdfDictionaryObject()
    d.add("Visible", PdfBooleanObject(True))
    assert "/Visible true" in d.encode(V).decode()


def test_encode_with_indirect_reference_value():
    d = PdfDictionaryObject()
    d.add("Pages", ObjectNumber(2))
    assert "/Pages 2 0 R" in d.encode(V).decode()


def test_typed_adds_type_name():
    d = PdfDictionaryObject().typed("Font")
    assert d.get_name("Type") == b"Font"


def test_duplicate_key_rejected():
    d = PdfDictionaryObject()
    d.add("A", 1)
    with pytest.raises(StructureError, match="duplicate key A"):
        d.add("A", 2)


def test_update_or_add_replaces_in_place():
    d = PdfDictionaryObject()
    d.add("A", 1)
    d.add("B", 2)
    d.update_or_add("A", 5)
    d.update_or_add("C", 6)
    assert d.get_integer("A") == 5
    assert d.encode(V) == b"<<\n/A 5\n/B 2\n/C 6\n>>\n"


def test_typed_getters():
    inner = PdfDictionaryObject()
    d = PdfDictionaryObject()
    d.add("N", 4.9)
    d.add("S", "hello")
    d.add("D", inner)
    assert d.get_integer("N") == 4
    assert d.get_string("S") == "hello"
    assert d.get_dict("D") is inner


def test_missing_key_raises():
    with pytest.raises(StructureError, match="Key 'X' not found"):
        PdfDictionaryObject().get_integer("X")


def test_wrong_type_raises():
    d = PdfDictionaryObject()
    d.add("S", "hello")
    with pytest.raises(StructureError, match="found String"):
        d.get_integer("S")
    with pytest.raises(StructureError, match="found String"):
        d.get_dict("S")


def test_get_returns_none_when_absent():
    d = PdfDictionaryObject()
    d.add("A", 1)
    assert d.get("Missing") is None
    assert d.get("A").as_integer() == 1


def test_push_to_array():
    d = PdfDictionaryObject()
    d.add("Kids", PdfArrayObject())
    d.push_to_array("Kids", ObjectNumber(3))
    assert d.encode(V) == b"<<\n/Kids [ 3 0 R  ]\n>>\n"


def test_push_to_array_on_non_array():
    d = PdfDictionaryObject()
    d.add("A", 1)
    with pytest.raises(StructureError, match="Key 'A' is not an array"):
        d.push_to_array("A", 2)
    with pytest.raises(StructureError, match="Key 'B' is not an array"):
        d.push_to_array("B", 2)


def test_serialize_plain_dictionary():
    d = PdfDictionaryObject().with_object_number(ObjectNumber(1))
    buf = io.BytesIO()
    written = d.serialize(V, buf)
    assert buf.getvalue() == b"1 0 obj\n<<\n>>\nendobj\n\n"
    assert written == [(ObjectNumber(1), 0)]


def test_serialize_writes_indirect_values_and_children():
    d = PdfDictionaryObject().with_object_number(ObjectNumber(1))
    d.add("Arr", PdfArrayObject([1]).with_object_number(ObjectNumber(2)))
    d.add("Ref", ObjectNumber(9))
    child = PdfDictionaryObject().with_object_number(ObjectNumber(3))
    d.add_child(child)
    buf = io.BytesIO()
    written = d.serialize(V, buf)
    first = b"1 0 obj\n<<\n/Arr 2 0 R \n/Ref 9 0 R \n>>\nendobj\n\n"
    second = b"2 0 obj\n[ 1 ]endobj\n\n"
    third = b"3 0 obj\n<<\n>>\nendobj\n\n"
    assert buf.getvalue() == first + second + third
    assert written == [
        (ObjectNumber(1), 0),
        (ObjectNumber(2), len(first)),
        (ObjectNumber(3), len(first) + len(second)),
    ]


def test_serialize_without_number_raises():
    with pytest.raises(StructureError):
        PdfDictionaryObject().serialize(V, io.BytesIO())


def test_as_dict_on_dictionary_and_other():
    d = PdfDictionaryObject()
    assert d.as_dict() is d
    with pytest.raises(StructureError, match="Unexpected type: Array"):
        PdfArrayObject().as_dict()


# ---- conversions --------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, b"true"),
        (7, b"7"),
        (2.5, b"2.5"),
        ("abc", b"(abc)"),
        (ObjectNumber(4), b"4 0 R "),
        (None, b""),
        ([1, 2], b"[ 1 2 ]"),
    ],
)
def test_to_pdf_object(value, expected):
    assert to_pdf_object(value).encode(V) == expected


def test_to_pdf_object_rejects_unknown():
    with pytest.raises(TypeError):
        to_pdf_object(object())


def test_builders():
    assert num(3).encode(V) == b"3"
    assert num_or_null(None).encode(V) == b""
    assert num_or_null(1.5).encode(V) == b"1.5"
    assert name("Type").encode(V) == b"/Type"
    assert string("x").encode(V) == b"(x)"
    assert isinstance(text("y"), PdfStringObject)
    assert text("y").as_string() == "y"