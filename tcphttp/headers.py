"""HTTP header field parsing into a case-insensitive mapping."""

from __future__ import annotations

import string

CRLF = b"\r\n"

_TOKEN_CHARS = frozenset("!#$%&'*+-.^_`|~" + string.digits + string.ascii_letters)


class HeaderError(ValueError):
    """Raised when a header line cannot be parsed."""


def is_token(name: str) -> bool:
    """Return True if every character of *name* is an HTTP token character."""
    return all(ch in _TOKEN_CHARS for ch in name)


class Headers(dict):
    """Header fields keyed by lower-cased field name."""

    def parse(self, data: bytes) -> tuple[int, bool]:
        """Parse at most one header line from *data*.

        Returns the number of bytes consumed and whether the blank line
        ending the header block was reached. Nothing is consumed until a
        complete line is available.
        """
        data = bytes(data)
        end = data.find(CRLF)
        if end == -1:
            return 0, False
        if end == 0:
            return len(CRLF), True

        raw_name, sep, raw_value = data[:end].partition(b":")
        if not sep:
            raise HeaderError("missing ':' in header line")

        name = raw_name.decode("utf-8", "replace")
        if name != name.rstrip(" "):
            raise HeaderError("invalid header field name")
        name = name.strip()
        if not is_token(name):
            raise HeaderError("contains invalid runes")

        self.set_header(name, raw_value.decode("utf-8", "replace").strip())
        return end + len(CRLF), False

    def set_header(self, name: str, value: str) -> None:
        """Store *value* under *name*, joining repeated fields with ', '."""
        key = name.lower()
        if key in self:
            self[key] = f"{self[key]}, {value}"
        else:
            self[key] = value

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look up a header by name, ignoring case."""
        return super().get(key.lower(), default)