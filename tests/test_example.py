from unittest import mock

import pytest

from setcookie.example import SAMPLE_COOKIE, main
from setcookie.helpers import format_expires

FIXED_NOW = 1_700_000_000


def _run(capsys):
    with mock.patch("time.time", return_value=FIXED_NOW):
        status = main([])
    return status, capsys.readouterr().out.splitlines()


def _section(lines, header):
    start = lines.index(header)
    return lines[start + 1:start + 10]


def test_main_returns_zero(capsys):
    status, lines = _run(capsys)
    assert status == 0
    assert lines.count("*" * 32) == 2


def test_basic_cookie_section(capsys):
    _, lines = _run(capsys)
    section = _section(lines, "BasicCookie Example:")
    assert section[:8] == [
        "Cookie Name: name",
        "Cookie Value: value",
        "Cookie Domain: example.com",
        "Cookie Path: /",
        "Cookie Expires: Wed, 21 Oct 2023 07:28:00 GMT",
        "Cookie Secure: 1",
        "Cookie HttpOnly: 1",
        "Cookie SameSite: (NULL)",
    ]


def test_cookie_section(capsys):
    _, lines = _run(capsys)
    section = _section(lines, "Cookie Example:")
    assert section[:8] == [
        "Cookie Name: name",
        "Cookie Value: value",
        "Cookie Domain: example.com",
        "Cookie Path: /",
        "Cookie Expires: Wed, 21 Oct 2023 07:28:00 GMT",
        "Cookie Secure: 1",
        "Cookie HttpOnly: 1",
        "Cookie SameSite: ",
    ]


@pytest.mark.parametrize("header", ["BasicCookie Example:", "Cookie Example:"])
def test_created_cookie_line(capsys, header):
    _, lines = _run(capsys)
    created = _section(lines, header)[8]
    expected = (
        f"name=value; expires={format_expires(FIXED_NOW)}; "
        "domain=example.com; path=/"
    )
    assert created == expected


def test_sample_cookie_is_the_documented_header():
    assert SAMPLE_COOKIE.startswith("name=value; domain=example.com")
    assert SAMPLE_COOKIE.endswith("secure; httponly")


def test_unknown_argument_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2