import pytest

from typedheaders.core import HeaderError
from typedheaders.flat_csv import FlatCsv, fmt_comma_delimited, from_comma_delimited


def test_comma():
    csv = FlatCsv("aaa, b; bb, ccc")
    assert list(csv) == ["aaa", "b; bb", "ccc"]


def test_semicolon():
    csv = FlatCsv("aaa; b, bb; ccc", ";")
    assert list(csv) == ["aaa", "b, bb", "ccc"]


def test_quoted_text():
    csv = FlatCsv('foo="bar,baz", sherlock=holmes')
    assert list(csv) == ['foo="bar,baz"', "sherlock=holmes"]


def test_empty_value_yields_one_empty_item():
    assert list(FlatCsv("")) == [""]


def test_non_ascii_yields_nothing():
    assert list(FlatCsv("caf\u00e9, tea")) == []


def test_from_values_single():
    assert FlatCsv.from_values(["chunked"]).value == "chunked"


def test_from_values_merges_with_separator():
    assert FlatCsv.from_values(["gzip", "chunked"]).value == "gzip, chunked"
    assert FlatCsv.from_values(["a", "b"], ";").value == "a; b"


def test_from_values_empty():
    assert FlatCsv.from_values([]).value == ""


def test_from_values_round_trip():
    items = ["accept-encoding", "accept-language", "cookie"]
    assert list(FlatCsv.from_values(items)) == items


def test_equality_by_value():
    assert FlatCsv("*") == FlatCsv.from_values(["*"])


def test_invalid_separator():
    with pytest.raises(ValueError):
        FlatCsv("a", ",;")


def test_from_comma_delimited_strings():
    assert from_comma_delimited(["a, ,b", "c"]) == ["a", "b", "c"]


def test_from_comma_delimited_parse():
    assert from_comma_delimited(["1, 2", "3"], int) == [1, 2, 3]


def test_from_comma_delimited_skips_non_ascii():
    assert from_comma_delimited(["caf\u00e9", "tea"]) == ["tea"]


def test_from_comma_delimited_parse_error():
    with pytest.raises(HeaderError):
        from_comma_delimited(["1, x"], int)


def test_fmt_comma_delimited():
    assert fmt_comma_delimited(["gzip", "chunked"]) == "gzip, chunked"
    assert fmt_comma_delimited([]) == ""


def test_fmt_then_parse_round_trip():
    items = ["respond-async", "wait=100"]
    assert from_comma_delimited([fmt_comma_delimited(items)]) == items