"""A Set-Cookie header value: parsing and formatting."""

from __future__ import annotations

import re
import time

from .helpers import format_expires, split_string, str_case_eq, trim_spaces

_HTTP_ONLY_PREFIX = "#HttpOnly_"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    """Read a leading signed 32-bit integer, ignoring any trailing text."""
    match = _INT_PREFIX.match(text)
    if not match:
        raise ValueError(f"not an integer: {text!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


class Cookie:
    """One HTTP cookie with its attributes."""

    def __init__(
        self,
        name: str = "",
        value: str = "",
        domain: str = "",
        path: str = "",
        expires: str | int = "",
        same_site: str = "",
        secure: bool = False,
        http_only: bool = False,
        partitioned: bool = False,
    ) -> None:
        self._name = name
        self._value = value
        self._domain = ""
        self._path = ""
        self._expires = ""
        self.same_site = same_site
        self.secure = secure
        self.http_only = http_only
        self.partitioned = partitioned
        self.domain = domain
        self.path = path
        self.expires = expires

    @classmethod
    def create(
        cls,
        name: str,
        value: str,
        domain: str = "",
        path: str = "",
        secure: str = "",
        expires: int = 0,
        same_site: str = "",
    ) -> "Cookie":
        """Build a cookie; ``secure`` counts as set only when it reads "TRUE"."""
        cookie = cls()
        cookie.name = name
        cookie.value = value
        cookie.domain = domain
        cookie.path = path
        cookie.secure = str_case_eq(secure, "TRUE")
        cookie.expires = expires
        cookie.same_site = same_site
        return cookie

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not name:
            raise ValueError("cookie name cannot be empty")
        self._name = name

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if not value:
            raise ValueError("cookie value cannot be empty")
        self._value = value

    @property
    def domain(self) -> str:
        return self._domain

    @domain.setter
    def domain(self, domain: str) -> None:
        if domain.startswith(_HTTP_ONLY_PREFIX):
            self._domain = domain[len(_HTTP_ONLY_PREFIX):]
            self.http_only = True
        else:
            self._domain = domain

    @property
    def path(self) -> str:
        return self._path

    @path.setter
    def path(self, path: str) -> None:
        if path != "unknown":
            self._path = path

    @property
    def expires(self) -> str:
        return self._expires

    @expires.setter
    def expires(self, expires: str | int) -> None:
        """Take a date string as is, or a Unix timestamp (0 leaves it unchanged)."""
        if isinstance(expires, str):
            self._expires = expires
        elif expires:
            self._expires = format_expires(expires)

    @property
    def is_session_cookie(self) -> bool:
        return not self._expires

    def from_string(self, cookie_str: str, domain: str = "") -> bool:
        """Parse a Set-Cookie header value; return whether a name was found."""
        name_set = False
        expires_set = False

        if domain:
            self.domain = domain

        for param in split_string(cookie_str, ";"):
            name, _, value = trim_spaces(param).partition("=")
            if not name:
                continue

            if not name_set:
                self.name = name
                if value:
                    self.value = value
                name_set = True
                continue

            if str_case_eq(name, "Domain"):
                self.domain = value
            elif str_case_eq(name, "Expires"):
                if not expires_set:
                    self.expires = value
            elif str_case_eq(name, "HttpOnly"):
                self.http_only = True
            elif str_case_eq(name, "Max-Age"):
                max_age = _parse_int(value)
                now = int(time.time())
                if max_age > 0:
                    self.expires = now + max_age
                    expires_set = True
                else:
                    self.expires = now
            elif str_case_eq(name, "Path"):
                self.path = value
            elif str_case_eq(name, "Secure"):
                self.secure = True
            elif str_case_eq(name, "SameSite"):
                self.same_site = value
                if str_case_eq(value, "None"):
                    self.secure = True
            elif str_case_eq(name, "Partitioned"):
                self.partitioned = True

        return name_set

    def to_string(self) -> str:
        """Format the cookie as a Set-Cookie header value."""
        parts = [f"{self._name}={self._value}"]
        if self._expires:
            parts.append(f"expires={self._expires}")
        if self._domain:
            parts.append(f"domain={self._domain}")
        if self._path:
            parts.append(f"path={self._path}")
        if self.secure:
            parts.append("secure")
        if self.http_only:
            parts.append("httponly")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"