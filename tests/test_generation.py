from pdfweave.generation import ROOT_GENERATION, Generation, ObjectStatus


def test_generation_enum():
    assert Generation.ROOT.as_int() == ROOT_GENERATION
    assert Generation.NORMAL.as_int() == 0


def test_generation_equality():
    assert Generation.ROOT.as_int() == Generation.ROOT.as_int()
    assert Generation.NORMAL.as_int() == Generation.NORMAL.as_int()
    assert Generation.ROOT.as_int() != Generation.NORMAL.as_int()
    assert Generation.ROOT != Generation.NORMAL


def test_generation_display():
    assert Generation.ROOT.as_int() == 65535
    assert str(Generation.ROOT) == "65535"
    assert Generation.NORMAL.as_int() == 0
    assert str(Generation.NORMAL) == "0"


def test_object_status_chars():
    assert ObjectStatus.FREE.as_char() == "f"
    assert ObjectStatus.IN_USE.as_char() == "n"
    assert str(ObjectStatus.IN_USE) == "n"