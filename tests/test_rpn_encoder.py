import pytest

from core import RPNDecoder, RPNEncoder


@pytest.mark.parametrize("infix, expected", [
    ("(1 + 2) * (3 + 4)", "12+34+*"),
    ("1 + 2 * 3", "123*+"),
    ("1 - 2 - 3", "12-3-"),
    ("1 - (2 + 3)", "123+-"),
    ("8 / (1 - 1 / 5)", "8115/-/"),
    ("(3+4)*5", "34+5*"),
    ("  7 ", "7"),
    ("", ""),
])
def test_encode(infix, expected):
    assert RPNEncoder.encode(infix) == expected


def test_encode_inverts_decode_for_fully_grouped_output():
    for stream in ["12+34+*", "123+-", "8115/-/", "12-34*+", "11+8+8*"]:
        assert RPNEncoder.encode(RPNDecoder.decode(stream)) == stream


@pytest.mark.parametrize("infix", [
    "1 + a",
    "1 ^ 2",
    "(1 + 2",
    "1 + 2)",
    "12 + 3",
    "1 2 + 3",
])
def test_encode_rejects_bad_input(infix):
    with pytest.raises(ValueError):
        RPNEncoder.encode(infix)


@pytest.mark.parametrize("infix, expected", [
    ("(1 + 2) * (3 + 4)", True),
    ("((1 + 2) * 3) * 4", True),
    ("1 + 2 + 3 + 4", True),
    ("(1 + 2", False),
    ("1 + 2)", False),
    (")1 + 2(", False),
    ("", False),
])
def test_is_balanced(infix, expected):
    assert RPNEncoder.is_balanced(infix) is expected
