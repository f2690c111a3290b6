import pytest

from typedheaders.core import (
    Header,
    HeaderError,
    is_valid_value,
    is_visible_ascii,
    just_one,
    to_header_value,
)


class Dnt(Header):
    name = "dnt"

    def __init__(self, value):
        self.value = value

    @classmethod
    def decode(cls, values):
        value = just_one(values)
        if value == "0":
            return cls(False)
        if value == "1":
            return cls(True)
        raise HeaderError()

    def encode(self):
        return [to_header_value("1" if self.value else "0")]


def test_header_base_is_abstract():
    with pytest.raises(TypeError):
        Header()


def test_dnt_decode_true():
    assert Dnt.decode(iter([to_header_value("1")])).value is True


def test_dnt_decode_false():
    assert Dnt.decode([to_header_value(b"0")]).value is False


def test_dnt_decode_invalid():
    with pytest.raises(HeaderError):
        Dnt.decode([to_header_value(2)])


def test_dnt_decode_empty():
    assert just_one([]) is None
    with pytest.raises(HeaderError):
        Dnt.decode([])


def test_dnt_decode_multiple_values_invalid():
    values = [to_header_value("0"), to_header_value("1")]
    assert just_one(values) is None
    with pytest.raises(HeaderError):
        Dnt.decode(values)


def test_dnt_round_trip():
    for flag in (True, False):
        encoded = Dnt(flag).encode()
        assert encoded == [to_header_value("1" if flag else "0")]
        assert Dnt.decode(encoded).value is flag


def test_just_one_empty():
    assert just_one([]) is None


def test_just_one_single():
    assert just_one(["a"]) == "a"


def test_just_one_many():
    assert just_one(["a", "b"]) is None


def test_just_one_iterator():
    assert just_one(iter(["only"])) == "only"


def test_is_valid_value_plain():
    assert is_valid_value("text/plain; charset=utf-8")


def test_is_valid_value_rejects_control_chars():
    assert not is_valid_value("a\nb")
    assert not is_valid_value("a\x7fb")
    assert not is_valid_value(b"a\x00b")


def test_is_valid_value_allows_tab_and_high_chars():
    assert is_valid_value("a\tb")
    assert is_valid_value("caf\u00e9")
    assert is_valid_value(b"\xa3")


def test_is_visible_ascii():
    assert is_visible_ascii("gzip, chunked")
    assert is_visible_ascii("a\tb")
    assert not is_visible_ascii("caf\u00e9")
    assert not is_visible_ascii(b"\xa3")


def test_to_header_value_string():
    assert to_header_value("websocket") == "websocket"


def test_to_header_value_int():
    assert to_header_value(31536000) == "31536000"


def test_to_header_value_bytes():
    assert to_header_value(b"chunked") == "chunked"


def test_to_header_value_rejects_newline():
    with pytest.raises(ValueError):
        to_header_value("foo\r\nbar")