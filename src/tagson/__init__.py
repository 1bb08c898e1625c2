"""
Reflection-driven JSON encoding with per-field tags.

Marshals arbitrary Python values to RFC 4627 JSON bytes by inspecting their
runtime shape: booleans, numbers, strings, bytes (as base64), sequences,
string-keyed mappings (keys sorted), dataclasses (fields in declaration
order, configured through a ``"json"`` tag in field metadata), references
and values that implement their own ``marshal_json`` hook.
"""

from typing import Any

from ._encode import EncodeConfig
from ._encode import EncodeState
from ._errors import InvalidUTF8Error
from ._errors import JSONEncodeError
from ._errors import JSONSyntaxError
from ._errors import MarshalerError
from ._errors import RecursionLimitExceeded
from ._errors import UnsupportedTypeError
from ._errors import UnsupportedValueError
from ._escape import html_escape
from ._inspect import Kind
from ._inspect import Marshaler
from ._inspect import classify
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._scanner import compact
from ._scanner import indent
from ._scanner import valid
from ._tags import TagDirective
from ._tags import parse_tag

__version__ = "0.1.0"


def marshal(v: Any, **kwargs: Any) -> bytes:
    """
    Returns the JSON encoding of v.

    Traverses v recursively. Values implementing marshal_json produce their
    own JSON; everything else is encoded by kind. Raises the first
    JSONEncodeError met during the traversal and returns no partial output.
    Keyword arguments build an EncodeConfig.
    """
    config = EncodeConfig(**kwargs)
    return EncodeState(config).marshal(v)


def marshal_indent(
    v: Any, prefix: str, indent_unit: str, **kwargs: Any
) -> bytes:
    """Like marshal but formats the output with indent."""
    b = marshal(v, **kwargs)
    buf = bytearray()
    indent(buf, b, prefix, indent_unit)
    return bytes(buf)


def marshal_for_html(v: Any, **kwargs: Any) -> bytes:
    """
    Like marshal but applies html_escape to the output.

    The result can be embedded verbatim in an HTML <script> element.
    """
    b = marshal(v, **kwargs)
    buf = bytearray()
    html_escape(buf, b)
    return bytes(buf)


__all__ = [
    "EncodeConfig",
    "HotPathStats",
    "InvalidUTF8Error",
    "JSONEncodeError",
    "JSONSyntaxError",
    "Kind",
    "Marshaler",
    "MarshalerError",
    "RecursionLimitExceeded",
    "TagDirective",
    "UnsupportedTypeError",
    "UnsupportedValueError",
    "classify",
    "clear_hot_path_stats",
    "compact",
    "get_hot_path_stats",
    "html_escape",
    "indent",
    "marshal",
    "marshal_for_html",
    "marshal_indent",
    "parse_tag",
    "valid",
]
