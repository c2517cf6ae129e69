import pytest

from replay.errors import InvalidArgument
from replay.params import INT32, INT64, parse_int, parse_optional_int


@pytest.mark.parametrize("raw, expected", [
    ("0", 0),
    ("42", 42),
    ("-1", -1),
    ("+7", 7),
    ("007", 7),
    ("1707467000000", 1707467000000),
])
def test_accepts_plain_integers(raw, expected):
    assert parse_int(raw, "index") == expected


@pytest.mark.parametrize("raw", ["", "abc", "1.5", " 3", "3 ", "1_000", "0x10", "-", "١٢"])
def test_rejects_malformed(raw):
    with pytest.raises(InvalidArgument) as exc:
        parse_int(raw, "index")
    assert exc.value.message == "invalid index format"


def test_missing_is_required_error():
    with pytest.raises(InvalidArgument) as exc:
        parse_int(None, "epochMs")
    assert exc.value.message == "epochMs parameter required"


def test_int32_bounds():
    assert parse_int("2147483647", "index", INT32) == 2147483647
    assert parse_int("-2147483648", "index", INT32) == -2147483648
    with pytest.raises(InvalidArgument):
        parse_int("2147483648", "index", INT32)


def test_int64_bounds():
    assert parse_int("9223372036854775807", "epochMs", INT64) == 2**63 - 1
    with pytest.raises(InvalidArgument):
        parse_int("9223372036854775808", "epochMs", INT64)


def test_optional():
    assert parse_optional_int(None, "endEpochMs") is None
    assert parse_optional_int("5", "endEpochMs") == 5
    with pytest.raises(InvalidArgument):
        parse_optional_int("x", "endEpochMs")
