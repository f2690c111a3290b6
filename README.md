# typedheaders

Strongly typed HTTP headers for Python. Each header is a class that knows its
field name, how to decode itself from the raw values found in a message, and
how to encode itself back into raw values. There are no dependencies outside
the standard library.

## Installing

```
pip install typedheaders
```

## A header map that understands types

`typedheaders.headermap.HeaderMap` is a case-insensitive, multi-value mapping
of header names to string values. Names are checked to be HTTP tokens and
stored in lower case; values are checked to be free of control characters
(bytes are read as Latin-1, other objects are formatted with `str`).

Plain access: `append`, `insert` (replaces and returns the old values), `get`
(first value), `get_all`, `remove`, `in`, `len` (number of values) and
iteration over `(name, value)` pairs.

Typed access:

```python
from typedheaders.headermap import HeaderMap
from typedheaders.headers import StrictTransportSecurity, TransferEncoding, UserAgent

headers = HeaderMap()
headers.typed_insert(TransferEncoding.chunked())
headers.typed_insert(UserAgent.parse("curl/8.0"))

headers.get("transfer-encoding")              # "chunked"
str(headers.typed_get(UserAgent))             # "curl/8.0"

headers.insert("Strict-Transport-Security", "max-age=31536000; includeSubdomains")
sts = headers.typed_get(StrictTransportSecurity)
sts.include_subdomains                        # True
sts.max_age                                   # datetime.timedelta(days=365)
```

- `typed_insert` replaces every value stored under the header's name with the
  values the header encodes to; a header that encodes to nothing leaves the
  map untouched.
- `typed_get` returns `None` when the header is absent or cannot be decoded.
- `typed_try_get` returns `None` when it is absent and raises
  `typedheaders.core.HeaderError` when it is present but malformed.

## Provided headers

`typedheaders.headers` contains:

| Class | Field | Notes |
|---|---|---|
| `SetCookie` | `set-cookie` | keeps every raw cookie string; decoding needs at least one |
| `StrictTransportSecurity` | `strict-transport-security` | `including_subdomains(max_age)`, `excluding_subdomains(max_age)`, `parse(text)`; duplicate or missing `max-age` is an error |
| `Te` | `te` | `Te.trailers()` |
| `TransferEncoding` | `transfer-encoding` | `chunked()`, `is_chunked()` (true when the last coding is `chunked`) |
| `Upgrade` | `upgrade` | `Upgrade.websocket()` |
| `UserAgent` | `user-agent` | `parse(text)` raises `InvalidUserAgent`; the value is not split |
| `Vary` | `vary` | `any()`, `is_any()`, `iter_strs()` |

Every header has a `decode(values)` classmethod and an `encode()` method
returning a list of strings. Several raw values of a list header are merged
with `", "`:

```python
from typedheaders.headers import Vary, TransferEncoding

Vary.any().is_any()                                        # True
TransferEncoding.decode(["gzip", "chunked"]).is_chunked()  # True
list(Vary.decode(["accept-encoding, accept-language"]).iter_strs())
# ["accept-encoding", "accept-language"]
```

## Building blocks

- `typedheaders.core` – the `Header` base class, `HeaderError`, and helpers
  `just_one`, `is_valid_value`, `is_visible_ascii` and `to_header_value`.
- `typedheaders.flat_csv.FlatCsv` – one value holding a comma (or other
  single-character) separated list; iterating yields trimmed items and does
  not split inside double quotes. `from_comma_delimited(values, parse)` and
  `fmt_comma_delimited(items)` parse and join comma-separated lists.
- `typedheaders.entity.EntityTag` and `EntityTagRange` – entity tags such as
  `"xyzzy"` and `W/"xyzzy"` with `strong_eq` / `weak_eq`, and ranges that are
  either `*` or a list of tags, with `matches_strong` / `matches_weak`.
- `typedheaders.http_date.HttpDate` – a whole-second UTC timestamp from 1970
  to 9999; parses IMF-fixdate, RFC 850 and asctime dates (the weekday must be
  right) and always formats as IMF-fixdate. `parse_http_date` and
  `format_http_date` work on plain Unix timestamps.
- `typedheaders.seconds.Seconds` – a non-negative whole number of seconds,
  parsed from a decimal header value.
- `typedheaders.value_string.HeaderValueString` – a string that is a legal
  header value.

## Writing your own header

Subclass `typedheaders.core.Header`, set `name`, and implement `decode` (a
classmethod taking the raw values) and `encode` (returning a list of values):

```python
from typedheaders.core import Header, HeaderError, just_one

class Dnt(Header):
    name = "dnt"

    def __init__(self, enabled):
        self.enabled = enabled

    @classmethod
    def decode(cls, values):
        value = just_one(values)
        if value == "1":
            return cls(True)
        if value == "0":
            return cls(False)
        raise HeaderError("invalid DNT value")

    def encode(self):
        return ["1" if self.enabled else "0"]
```

## What it does not do

This is a library of header types and nothing more: it sends and receives no
HTTP messages and does not plug into any HTTP client or server. Only the seven
headers listed above are provided; headers such as `Accept`, `Content-Type`,
`ETag` or `Warning` are not, though `EntityTag`, `HttpDate` and the other
building blocks can be used to write them. `HeaderMap` enforces no rules
between headers (inserting `Transfer-Encoding` does not remove
`Content-Length`).

## Running the tests

```
pip install -e ".[test]"
pytest
```