# pdfweave

`pdfweave` provides the pieces needed to write PDF files from Python:

- `pdfweave.objects`: a PDF object model (numbers, booleans, nulls, names,
  strings, references, arrays, dictionaries and streams) that encodes itself
  to PDF syntax, plus object numbering and indirect-object writing;
- `pdfweave.header`: the file header;
- `pdfweave.features`: PDF versions and the version that introduced each
  feature;
- `pdfweave.generation`: generation numbers and cross-reference entry status;
- `pdfweave.ext_g_state`: extended graphics state (transparency, blend modes,
  rendering intent and other parameters);
- `pdfweave.function`: PDF functions (sampled, exponential, stitching and
  PostScript calculator);
- `pdfweave.file_specification`, `pdfweave.form`, `pdfweave.metadata`: file
  specification, form and document information dictionaries;
- `pdfweave.encryption`: the standard security handler, revision 2 (40-bit
  RC4): owner and user values, key derivation, permission flags and file
  identifier selection;
- `pdfweave.errors`: the exception hierarchy.

It has no dependencies outside the standard library and needs Python 3.10
or later.

## Installation

```
pip install pdfweave
```

To run the test suite:

```
pip install "pdfweave[test]"
pytest
```

## Examples

### Dictionaries and values

```python
from pdfweave.features import Version
from pdfweave.objects.containers import PdfDictionaryObject, name, num

page = PdfDictionaryObject().typed("Page")
page.add("Rotate", num(90))
page.add("Group", name("Transparency"))

assert "Rotate" in page
assert page.get_integer("Rotate") == 90
print(page.encode_value(Version.V1_7).decode("ascii"))
```

`add` also accepts plain values, converted by `to_pdf_object`: `bool`
becomes a boolean, `int` and `float` numbers, `str` a text string,
`ObjectNumber` a reference, `None` null and a list or tuple an array.
Adding a key that is already present raises `StructureError`; use
`update_or_add` to replace a value instead. Real numbers are written with
at most four decimals and no trailing zeros. Text that is not ASCII is
written as UTF-16BE with a byte-order mark before PDF 2.0, and as UTF-8
with a byte-order mark from `Version.V2_2017` on.

### Writing indirect objects

```python
import io

from pdfweave.features import Version
from pdfweave.header import write_header
from pdfweave.objects.base import ObjectNumber, ObjectNumberAllocator
from pdfweave.objects.containers import PdfDictionaryObject

out = io.BytesIO()
write_header(Version.V1_7, out)          # "%PDF-1.7" line and binary marker

numbers = ObjectNumberAllocator()
catalog = PdfDictionaryObject().typed("Catalog")
catalog.with_object_number(numbers.next_object_number())

written = catalog.serialize(Version.V1_7, out)
assert written == [(ObjectNumber(1), 20)]
```

`serialize` returns the `(object number, byte offset)` pair of every object
it wrote: the dictionary itself, any indirect values it holds and any
children added with `add_child`. Where an indirect object appears as a
value, it is encoded as a reference `N 0 R`.

### Streams

```python
from pdfweave.features import Version
from pdfweave.objects.stream import PdfStreamObject

stream = PdfStreamObject(content=b"BT /F1 12 Tf ET").compressed()
data = stream.encode_value(Version.V1_7)
assert b"/Filter /FlateDecode" in data
```

`/Length` is filled in when the stream is encoded.

### Graphics state

```python
from pdfweave.ext_g_state import BlendMode, ExtGState

state = (
    ExtGState()
    .set_stroke_alpha(0.5)
    .set_fill_alpha(1.5)          # clamped to 1.0
    .set_blend_mode(BlendMode.SCREEN)
)
gs_dict = state.to_dict()
assert "CA" in gs_dict and "ca" in gs_dict and "BM" in gs_dict
```

### Document information

```python
from pdfweave.metadata import Metadata, TrappedState

info = (
    Metadata()
    .with_title("Quarterly report")
    .with_author("A. Writer")
    .with_trapped(TrappedState.FALSE)
)
assert not info.is_empty()
```

### Functions

```python
from pdfweave.function import Function2Exponential
from pdfweave.objects.containers import PdfArrayObject

fade = (
    Function2Exponential(PdfArrayObject.from_floats([0.0, 1.0]), 1.0)
    .with_values_at_start(PdfArrayObject.from_floats([1.0, 0.0, 0.0]))
    .with_values_at_end(PdfArrayObject.from_floats([0.0, 0.0, 1.0]))
)
```

`Function0Sampled` accepts only the bit depths the PDF specification allows
(1, 2, 4, 8, 12, 16, 24 or 32) and raises `StructureError` otherwise.

### Features and versions

```python
from pdfweave.features import Feature, Version

assert Feature.TRANSPARENCY.min_version() is Version.V1_4
assert Version.V1_7 > Version.V1_4
```

### Encryption values

```python
from pdfweave.encryption import (
    EncryptionConfig,
    Permissions,
    bytes_to_pdf_hex_string,
    compute_encryption_values,
    rc4,
)

assert bytes_to_pdf_hex_string(bytes([0x4F, 0x00, 0xFF])) == "<4F00FF>"

cipher = rc4(b"hello", b"some data")
assert rc4(b"hello", cipher) == b"some data"

config = EncryptionConfig(
    owner_password="password",
    user_password="secret",
    permissions=Permissions(print=True),
)
values = compute_encryption_values(config, b"file-identifier")
assert len(values.o_value) == 32 and len(values.encryption_key) == 5
```

`Permissions.as_int()` gives the signed 32-bit `/P` value; every
permission is denied unless set. `get_id_bytes` picks the identifier bytes
for a `FileIdentifierMode`: the custom bytes for `FileIdentifierMode.custom`,
otherwise the data hash it is given.

## What the package does not do

- It does not assemble a whole document: there is no page tree, catalog
  builder, cross-reference table, trailer, fonts or drawing commands. It
  writes the header and individual indirect objects, and leaves the rest of
  the file to the caller.
- It computes the standard security values but does not encrypt strings or
  stream content as they are written.
- `compute_data_hash` returns the MD5 digest of empty input; the objects
  passed to it do not contribute to the hash.
- It does not read or parse existing PDF files.

## Errors

All errors derive from `pdfweave.errors.PdfError`, so one `except` clause
catches everything the package raises for malformed structures, for example
`StructureError` for duplicate keys, missing keys and values of the wrong
type.