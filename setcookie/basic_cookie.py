"""A lenient Set-Cookie parser where every attribute may be absent."""

from __future__ import annotations

import re
import time

from .helpers import format_expires, split_items, str_case_eq

_HTTP_ONLY_MARK = "#HttpOnly_"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer; text that does not start with one reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class BasicCookie:
    """One HTTP cookie whose unset attributes are ``None``.

    Unlike :class:`setcookie.cookie.Cookie`, names and values are never
    validated, empty items are skipped while parsing, only leading spaces
    are trimmed, and a quoted cookie name has its quotes removed.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._value: str | None = None
        self._domain: str | None = None
        self._path: str | None = None
        self._expires: str | None = None
        self._same_site: str | None = None
        self._secure = False
        self._http_only = False

    @classmethod
    def create(
        cls,
        name: str | None,
        value: str | None,
        domain: str,
        path: str,
        secure: str,
        expires: int,
        same_site: str | None = None,
    ) -> "BasicCookie":
        """Build a cookie; ``secure`` counts as set only when it reads "TRUE"."""
        cookie = cls()
        cookie._name = name
        cookie._value = value
        cookie._set_domain(domain)
        cookie._set_path(path)
        cookie._set_expires_at(expires)
        cookie._secure = str_case_eq(secure, "TRUE")
        cookie._same_site = same_site
        return cookie

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def value(self) -> str | None:
        return self._value

    @property
    def domain(self) -> str | None:
        return self._domain

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def expires(self) -> str | None:
        return self._expires

    @property
    def same_site(self) -> str | None:
        return self._same_site

    @property
    def secure(self) -> bool:
        return self._secure

    @property
    def http_only(self) -> bool:
        return self._http_only

    @property
    def is_session_cookie(self) -> bool:
        return not self._expires

    def _set_domain(self, domain: str) -> None:
        if _HTTP_ONLY_MARK in domain:
            self._domain = domain[len(_HTTP_ONLY_MARK):]
            self._http_only = True
        else:
            self._domain = domain

    def _set_path(self, path: str) -> None:
        if path != "unknown":
            self._path = path

    def _set_expires_at(self, expires: int) -> None:
        if not expires:
            return
        try:
            self._expires = format_expires(expires)
        except ValueError:
            # An unrepresentable time leaves the expiry as it was.
            return

    def from_string(self, cookie_str: str, domain: str | None = None) -> bool:
        """Parse a Set-Cookie header value; return whether a name was found."""
        name_set = False

        if domain is not None:
            self._set_domain(domain)

        for item in split_items(cookie_str, ";"):
            name, _, value = item.lstrip(" ").partition("=")
            if not name:
                continue

            if not name_set:
                if name[0] == '"' and name[-1] == '"':
                    name = name[1:-1]
                self._name = name
                self._value = value
                name_set = True
                continue

            if str_case_eq(name, "Domain"):
                self._set_domain(value)
            elif str_case_eq(name, "Expires"):
                self._expires = value
            elif str_case_eq(name, "HttpOnly"):
                self._http_only = True
            elif str_case_eq(name, "Max-Age"):
                max_age = _atoi(value)
                if max_age > 0:
                    self._set_expires_at(int(time.time()) + max_age)
            elif str_case_eq(name, "Path"):
                self._set_path(value)
            elif str_case_eq(name, "Secure"):
                self._secure = True
            elif str_case_eq(name, "SameSite"):
                self._same_site = value
                if str_case_eq(value, "None"):
                    self._secure = True

        return name_set

    def to_string(self) -> str:
        """Format the cookie as a Set-Cookie header value."""
        parts = [f"{self._name or ''}={self._value or ''}"]
        if self._expires is not None:
            parts.append(f"expires={self._expires}")
        if self._domain is not None:
            parts.append(f"domain={self._domain}")
        if self._path is not None:
            parts.append(f"path={self._path}")
        if self._secure:
            parts.append("secure")
        if self._http_only:
            parts.append("httponly")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"