"""Command that parses and builds a sample cookie with both cookie classes."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterator, Sequence

from .basic_cookie import BasicCookie
from .cookie import Cookie

SAMPLE_COOKIE = (
    "name=value; domain=example.com; path=/; "
    "expires=Wed, 21 Oct 2023 07:28:00 GMT; secure; httponly"
)
RULE = "*" * 32


def _text(value: str | None) -> str:
    return "(NULL)" if value is None else value


def _describe(cookie: BasicCookie | Cookie) -> Iterator[str]:
    yield f"Cookie Name: {_text(cookie.name)}"
    yield f"Cookie Value: {_text(cookie.value)}"
    yield f"Cookie Domain: {_text(cookie.domain)}"
    yield f"Cookie Path: {_text(cookie.path)}"
    yield f"Cookie Expires: {_text(cookie.expires)}"
    yield f"Cookie Secure: {int(cookie.secure)}"
    yield f"Cookie HttpOnly: {int(cookie.http_only)}"
    yield f"Cookie SameSite: {_text(cookie.same_site)}"


def _demonstrate(cookie_class: type[BasicCookie] | type[Cookie]) -> Iterator[str]:
    yield RULE
    yield f"{cookie_class.__name__} Example:"

    parsed = cookie_class()
    parsed.from_string(SAMPLE_COOKIE)
    yield from _describe(parsed)

    built = cookie_class.create(
        "name", "value", "example.com", "/", "secure", int(time.time()), "Lax"
    )
    yield built.to_string()


def main(argv: Sequence[str] | None = None) -> int:
    """Print what both cookie classes make of a sample Set-Cookie value."""
    parser = argparse.ArgumentParser(
        prog="setcookie",
        description="Parse and format a sample Set-Cookie header value.",
    )
    parser.parse_args(argv)

    for cookie_class in (BasicCookie, Cookie):
        for line in _demonstrate(cookie_class):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())