import pytest

from typedheaders.core import HeaderError
from typedheaders.entity import EntityTag, EntityTagRange


def test_etag_parse_success():
    tag = EntityTag.parse(b'"foobar"')
    assert tag is not None
    assert not tag.is_weak()
    assert tag.tag() == "foobar"

    weak = EntityTag.parse(b'W/"weaktag"')
    assert weak is not None
    assert weak.is_weak()
    assert weak.tag() == "weaktag"


@pytest.mark.parametrize(
    "raw",
    [
        b"no-dquote",
        b'w/"the-first-w-is-case sensitive"',
        b'W/"',
        b"",
        b'"unmatched-dquotes1',
        b'unmatched-dquotes2"',
        b'"inner"quotes"',
    ],
)
def test_etag_parse_failures(raw):
    assert EntityTag.parse(raw) is None


def test_constructor_rejects_invalid():
    with pytest.raises(ValueError):
        EntityTag("no-dquote")


def test_cmp():
    etag1 = EntityTag('W/"1"')
    etag2 = EntityTag('W/"1"')
    assert not etag1.strong_eq(etag2)
    assert etag1.weak_eq(etag2)
    assert etag1.strong_ne(etag2)
    assert not etag1.weak_ne(etag2)

    etag2 = EntityTag('W/"2"')
    assert not etag1.strong_eq(etag2)
    assert not etag1.weak_eq(etag2)
    assert etag1.strong_ne(etag2)
    assert etag1.weak_ne(etag2)

    etag2 = EntityTag('"1"')
    assert not etag1.strong_eq(etag2)
    assert etag1.weak_eq(etag2)
    assert etag1.strong_ne(etag2)
    assert not etag1.weak_ne(etag2)

    etag1 = EntityTag('"1"')
    assert etag1.strong_eq(etag2)
    assert etag1.weak_eq(etag2)
    assert not etag1.strong_ne(etag2)
    assert not etag1.weak_ne(etag2)


def test_try_from_values_one():
    assert EntityTag.try_from_values(['"foobar"']) == EntityTag('"foobar"')


def test_try_from_values_rejects_many_and_none():
    with pytest.raises(HeaderError):
        EntityTag.try_from_values(['"a"', '"b"'])
    with pytest.raises(HeaderError):
        EntityTag.try_from_values([])
    with pytest.raises(HeaderError):
        EntityTag.try_from_values(["no-dquote"])


def test_range_any():
    rng = EntityTagRange.try_from_values(["*"])
    assert rng.is_any()
    assert rng.matches_strong(EntityTag('W/"1"'))
    assert rng.to_value() == "*"


def test_range_tags_matching():
    rng = EntityTagRange.try_from_values(['"a", W/"b"'])
    assert not rng.is_any()
    assert rng.matches_strong(EntityTag('"a"'))
    assert not rng.matches_strong(EntityTag('"b"'))
    assert rng.matches_weak(EntityTag('"b"'))
    assert not rng.matches_weak(EntityTag('"c"'))


def test_range_merges_values():
    rng = EntityTagRange.try_from_values(['"a"', '"b"'])
    assert rng.to_value() == '"a", "b"'
    assert rng.matches_strong(EntityTag('"b"'))