# setcookie

A small library for reading and writing HTTP `Set-Cookie` header values.

## Installation

```
pip install setcookie
```

## The two cookie classes

`setcookie.cookie.Cookie`

- `Cookie.create(...)` and assigning to `name` or `value` raise `ValueError`
  when given an empty string.
- `from_string` trims spaces on both sides of each `;`-separated item. An
  empty value after the first `=` leaves `value` as it was.
- `Max-Age` with a positive number sets `expires` to now plus that many
  seconds, and any later `Expires` is then ignored. Zero or a negative number
  sets `expires` to the current time. A `Max-Age` that does not start with an
  integer raises `ValueError`.
- `Partitioned` sets the `partitioned` attribute.
- The attributes `domain`, `path`, `expires`, `same_site`, `secure`,
  `http_only` and `partitioned` can be assigned. `expires` takes either a date
  string, which is kept as is, or a Unix timestamp. The timestamp `0` leaves
  it unchanged.

`setcookie.basic_cookie.BasicCookie`

- Names and values are never checked. Attributes that were never set are
  `None`, and the attributes are read-only properties.
- `from_string` skips empty items and trims only leading spaces. Double quotes
  around the cookie name are removed.
- Only a positive `Max-Age` is applied. A value that does not start with an
  integer counts as `0`.

Both classes recognise `Domain`, `Path`, `Expires`, `Max-Age`, `Secure`,
`HttpOnly` and `SameSite`, in any letter case. They behave the same way on the
following points:

- `SameSite=None` also marks the cookie as secure.
- A domain that begins with `#HttpOnly_`, as in Netscape cookie files, has
  that marker removed and marks the cookie as HTTP-only.
- A path of `unknown` is ignored.
- `is_session_cookie` is true when no expiry is set.

## Parsing a header

```python
from setcookie.cookie import Cookie

cookie = Cookie()
ok = cookie.from_string(
    "sessionId=token; Expires=Wed, 21 Oct 2025 07:28:00 GMT; "
    "Domain=example.com; Path=/; Secure; HttpOnly; SameSite=Lax"
)
assert ok
print(cookie.name, cookie.value, cookie.domain, cookie.path)
print(cookie.secure, cookie.http_only, cookie.same_site)
```

`from_string(cookie_str, domain)` returns `True` once a name has been found.
When a `domain` argument is given, it is applied before parsing, so a `Domain`
attribute in the header replaces it.

## Building a header

```python
import time
from setcookie.cookie import Cookie

cookie = Cookie.create("name", "value", "example.com", "/", "TRUE", int(time.time()) + 3600, "Lax")
print(cookie.to_string())
# name=value; expires=...; domain=example.com; path=/; secure
```

The `secure` argument of `create` is a string. It counts as set only when it
equals `"TRUE"`, ignoring case. An `expires` of `0` makes a session cookie. Any
other value is a Unix timestamp, written in RFC 1123 format with English day
and month names, for example `Wed, 21 Oct 2015 07:28:00 GMT`.

`to_string()`, which is also what `str()` returns, writes the name and value
first. It then adds, when present, `expires`, `domain`, `path`, `secure` and
`httponly`, in that order. `SameSite` and `Partitioned` are not written.

## Helpers

`setcookie.helpers` holds the small functions the classes use:

- `split_string`
- `split_items`
- `trim_spaces`
- `str_case_eq`, which compares strings ignoring the case of ASCII letters
- `format_expires`, which turns a Unix timestamp into an RFC 1123 GMT date and raises `ValueError` when the timestamp is out of range

## Example program

```
setcookie-example
```

This parses a sample header with both classes and prints each attribute. It
then builds a cookie with each class and prints the resulting header.

## What it does not do

- There is no cookie jar: cookies are not stored, matched against URLs or
  expired.
- `Expires` dates are kept as text and are not parsed.
- Cookie names and values are not checked against the characters that HTTP
  allows.