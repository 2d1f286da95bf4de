"""Parse and format HTTP Set-Cookie header values with two cookie classes."""

__version__ = "0.1.0"
__all__ = ["basic_cookie", "cookie", "example", "helpers"]