"""
String literal rendering and HTML-safe re-escaping.

``<`` and ``>`` are always written as ``\\u003c`` and ``\\u003e`` so that a
user-controlled string cannot close an enclosing ``<script>`` element. ``&``
is left alone here and only rewritten by the opt-in html_escape pass.
"""

import re

from ._errors import InvalidUTF8Error
from ._profile import ProfileContext

_HEX = "0123456789abcdef"
_HEX_BYTES = b"0123456789abcdef"

_SURROGATE_MIN = 0xD800
_SURROGATE_MAX = 0xDFFF

# Everything the scan has to stop at; all other code points are copied as-is.
_NEEDS_ESCAPE = re.compile("[\\x00-\\x1f\"\\\\<>\\ud800-\\udfff]")
_HTML_UNSAFE = re.compile(b"[<>&]")

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
}


def _escape_char(c: str) -> str:
    short = _SHORT_ESCAPES.get(c)
    if short is not None:
        return short
    code = ord(c)
    return "\\u00" + _HEX[code >> 4] + _HEX[code & 0xF]


def render_string(s: str) -> bytes:
    """
    Returns s as a quoted JSON string literal encoded in UTF-8.

    Raises InvalidUTF8Error if s contains lone surrogates, which is how a
    Python str carries undecodable input (e.g. via surrogateescape).
    """
    with ProfileContext("render_string", len(s)):
        parts = ['"']
        start = 0
        for match in _NEEDS_ESCAPE.finditer(s):
            i = match.start()
            c = s[i]
            if _SURROGATE_MIN <= ord(c) <= _SURROGATE_MAX:
                raise InvalidUTF8Error(s)
            if start < i:
                parts.append(s[start:i])
            parts.append(_escape_char(c))
            start = i + 1
        if start < len(s):
            parts.append(s[start:])
        parts.append('"')
        return "".join(parts).encode("utf-8")


def write_string(buf: bytearray, s: str) -> None:
    """Appends the JSON literal for s to buf."""
    buf += render_string(s)


def html_escape(dst: bytearray, src: bytes | bytearray | memoryview) -> None:
    """
    Appends src to dst with ``<``, ``>`` and ``&`` replaced by \\u00XX escapes.

    Those three bytes can only occur inside string literals of valid JSON,
    so a plain byte scan is enough and the result is safe to embed in an
    HTML ``<script>`` element.
    """
    start = 0
    for match in _HTML_UNSAFE.finditer(src):
        i = match.start()
        if start < i:
            dst += src[start:i]
        c = src[i]
        dst += b"\\u00"
        dst.append(_HEX_BYTES[c >> 4])
        dst.append(_HEX_BYTES[c & 0xF])
        start = i + 1
    if start < len(src):
        dst += src[start:]
