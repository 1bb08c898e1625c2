"""
The recursive encoder.

EncodeState classifies each value with the inspector and dispatches through
a per-Kind handler table, appending to a buffer it owns exclusively. The
first error raised anywhere in the traversal propagates to the caller and
the partial buffer is discarded with the state.
"""

import base64
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ._errors import MarshalerError
from ._errors import RecursionLimitExceeded
from ._errors import UnsupportedTypeError
from ._errors import UnsupportedValueError
from ._escape import render_string
from ._escape import write_string
from ._inspect import Kind
from ._inspect import classify
from ._inspect import deref
from ._inspect import is_empty
from ._inspect import struct_fields
from ._profile import ProfileContext
from ._scanner import compact

logger = logging.getLogger(__name__)

DEFAULT_TAG_KEY = "json"
DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures encoding behavior with immutable settings.

    tag_key names the dataclass field metadata entry holding field tags.
    max_depth bounds nesting so that cyclic values fail with
    RecursionLimitExceeded instead of exhausting the interpreter stack.
    """

    tag_key: str = DEFAULT_TAG_KEY
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.tag_key, str) or not self.tag_key:
            raise TypeError("tag_key must be a non-empty string")
        if not isinstance(self.max_depth, int) or isinstance(
            self.max_depth, bool
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")


class EncodeState:
    """Encodes one top-level value into a private buffer."""

    _handlers: dict[Kind, Callable[["EncodeState", Any, bool], None]]

    def __init__(self, config: EncodeConfig):
        self.config = config
        self.buf = bytearray()
        self.depth = 0

    def marshal(self, value: Any) -> bytes:
        """Encodes value and returns the finished JSON text."""
        with ProfileContext("marshal"):
            self.reflect_value(value)
        return bytes(self.buf)

    def reflect_value(self, value: Any, quoted: bool = False) -> None:
        """
        Writes value to the buffer.

        If quoted is true, booleans, numbers and strings are wrapped in an
        extra JSON string layer; other kinds ignore it.
        """
        self.depth += 1
        if self.depth > self.config.max_depth:
            logger.debug(
                "max_depth %d exceeded at %s",
                self.config.max_depth,
                type(value).__qualname__,
            )
            raise RecursionLimitExceeded(self.config.max_depth)

        self._handlers[classify(value)](self, value, quoted)
        self.depth -= 1

    def _write_scalar(self, text: str, quoted: bool) -> None:
        if quoted:
            write_string(self.buf, text)
        else:
            self.buf += text.encode("ascii")

    def _encode_custom(self, value: Any, quoted: bool) -> None:
        try:
            raw = value.marshal_json()
            if not isinstance(raw, bytes | bytearray | memoryview | str):
                raise TypeError(
                    f"marshal_json returned {type(raw).__name__}, "
                    "want bytes or str"
                )
            compact(self.buf, raw)
        except Exception as e:
            logger.debug(
                "marshal_json failed for %s: %s", type(value).__qualname__, e
            )
            raise MarshalerError(type(value), e) from e

    def _encode_bool(self, value: Any, quoted: bool) -> None:
        self._write_scalar("true" if value else "false", quoted)

    def _encode_integer(self, value: Any, quoted: bool) -> None:
        try:
            text = str(int(value))
        except ValueError as e:
            # sys.get_int_max_str_digits() bounds int-to-str conversion
            raise UnsupportedValueError(value, str(e)) from e
        self._write_scalar(text, quoted)

    def _encode_float(self, value: Any, quoted: bool) -> None:
        f = float(value)
        if math.isnan(f) or math.isinf(f):
            raise UnsupportedValueError(value, repr(f))
        self._write_scalar(repr(f), quoted)

    def _encode_string(self, value: Any, quoted: bool) -> None:
        if quoted:
            # Double encoding: the literal itself becomes string content.
            write_string(self.buf, render_string(value).decode("utf-8"))
        else:
            write_string(self.buf, value)

    def _encode_bytes(self, value: Any, quoted: bool) -> None:
        self.buf += b'"'
        self.buf += base64.b64encode(value)
        self.buf += b'"'

    def _encode_sequence(self, value: Any, quoted: bool) -> None:
        self.buf += b"["
        for i, elem in enumerate(value):
            if i > 0:
                self.buf += b","
            self.reflect_value(elem)
        self.buf += b"]"

    def _encode_map(self, value: Any, quoted: bool) -> None:
        keys = list(value)
        for key in keys:
            if not isinstance(key, str):
                raise UnsupportedTypeError(
                    type(value), f"key of type {type(key).__name__}"
                )
        keys.sort()

        self.buf += b"{"
        for i, key in enumerate(keys):
            if i > 0:
                self.buf += b","
            write_string(self.buf, key)
            self.buf += b":"
            self.reflect_value(value[key])
        self.buf += b"}"

    def _encode_struct(self, value: Any, quoted: bool) -> None:
        with ProfileContext("encode_struct"):
            self.buf += b"{"
            first = True
            for field in struct_fields(type(value), self.config.tag_key):
                field_value = field.value_of(value)
                if field.omit_empty and is_empty(field_value):
                    continue
                if first:
                    first = False
                else:
                    self.buf += b","
                write_string(self.buf, field.name)
                self.buf += b":"
                self.reflect_value(field_value, field.quoted)
            self.buf += b"}"

    def _encode_reference(self, value: Any, quoted: bool) -> None:
        target = deref(value)
        if target is None:
            self.buf += b"null"
        else:
            self.reflect_value(target)

    def _encode_unsupported(self, value: Any, quoted: bool) -> None:
        raise UnsupportedTypeError(type(value))


EncodeState._handlers = {
    Kind.CUSTOM: EncodeState._encode_custom,
    Kind.BOOL: EncodeState._encode_bool,
    Kind.SIGNED_INTEGER: EncodeState._encode_integer,
    Kind.UNSIGNED_INTEGER: EncodeState._encode_integer,
    Kind.FLOAT: EncodeState._encode_float,
    Kind.STRING: EncodeState._encode_string,
    Kind.BYTE_SEQUENCE: EncodeState._encode_bytes,
    Kind.SEQUENCE: EncodeState._encode_sequence,
    Kind.MAP: EncodeState._encode_map,
    Kind.STRUCT: EncodeState._encode_struct,
    Kind.REFERENCE: EncodeState._encode_reference,
    Kind.UNSUPPORTED: EncodeState._encode_unsupported,
}
