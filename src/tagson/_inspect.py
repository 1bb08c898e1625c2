"""
Runtime shape classification.

Every value handed to the encoder is mapped onto one member of the closed
``Kind`` enumeration; the encoder dispatches on that member alone. Struct
field layouts (names, tags, options) are resolved once per dataclass type
and cached.
"""

import dataclasses
import weakref
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from ._errors import UnsupportedValueError
from ._tags import parse_tag


class Kind(Enum):
    """Closed classification of a value's runtime shape."""

    BOOL = "bool"
    SIGNED_INTEGER = "signed_integer"
    UNSIGNED_INTEGER = "unsigned_integer"
    FLOAT = "float"
    STRING = "string"
    BYTE_SEQUENCE = "byte_sequence"
    SEQUENCE = "sequence"
    MAP = "map"
    STRUCT = "struct"
    REFERENCE = "reference"
    CUSTOM = "custom"
    UNSUPPORTED = "unsupported"


NUMERIC_KINDS = frozenset(
    {Kind.SIGNED_INTEGER, Kind.UNSIGNED_INTEGER, Kind.FLOAT}
)
SIZED_KINDS = frozenset(
    {Kind.STRING, Kind.BYTE_SEQUENCE, Kind.SEQUENCE, Kind.MAP}
)


@runtime_checkable
class Marshaler(Protocol):
    """
    Implemented by values that produce their own JSON.

    marshal_json must return valid JSON text as bytes or str; the encoder
    validates and compacts it before splicing it into the output.
    """

    def marshal_json(self) -> bytes | str: ...


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved output configuration for one visible dataclass field."""

    name: str
    attr: str
    omit_empty: bool = False
    quoted: bool = False

    def value_of(self, obj: Any) -> Any:
        try:
            return getattr(obj, self.attr)
        except AttributeError as e:
            # init=False fields that were never assigned
            raise UnsupportedValueError(
                obj,
                f"field {type(obj).__qualname__}.{self.attr} is unset",
            ) from e


_field_cache: weakref.WeakKeyDictionary[
    type, dict[str, tuple[FieldDescriptor, ...]]
] = weakref.WeakKeyDictionary()


def is_marshaler(value: Any) -> bool:
    """Reports whether value supplies its own marshal_json hook."""
    return not isinstance(value, type) and isinstance(value, Marshaler)


def structural_kind(value: Any) -> Kind:  # noqa: PLR0911
    """Classifies value by shape alone, ignoring any marshal_json hook."""
    if value is None:
        return Kind.REFERENCE
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, Integral):
        return Kind.SIGNED_INTEGER if value < 0 else Kind.UNSIGNED_INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bytes | bytearray | memoryview):
        return Kind.BYTE_SEQUENCE
    if isinstance(value, weakref.ref):
        return Kind.REFERENCE
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return Kind.STRUCT
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, Sequence):
        return Kind.SEQUENCE
    return Kind.UNSUPPORTED


def classify(value: Any) -> Kind:
    """Classifies value; a marshal_json hook outranks every structural kind."""
    if is_marshaler(value):
        return Kind.CUSTOM
    return structural_kind(value)


def deref(value: Any) -> Any:
    """Follows a reference; returns None for None or a dead weak reference."""
    if value is None:
        return None
    return value()


def is_empty(value: Any) -> bool:
    """
    Reports whether value counts as empty for the omitempty option.

    False, numeric zero, zero-length strings, bytes, sequences and maps,
    None and dead weak references are empty. Dataclass instances never are,
    whatever their field values.
    """
    kind = structural_kind(value)
    if kind is Kind.BOOL:
        return not value
    if kind in NUMERIC_KINDS:
        return value == 0
    if kind in SIZED_KINDS:
        return len(value) == 0
    if kind is Kind.REFERENCE:
        return deref(value) is None
    return False


def struct_fields(cls: type, tag_key: str) -> tuple[FieldDescriptor, ...]:
    """
    Returns the visible fields of dataclass cls in declaration order.

    Fields whose attribute name starts with an underscore are private and
    skipped. The result is cached per (cls, tag_key); the cache holds only
    weak references to classes.
    """
    per_class = _field_cache.get(cls)
    if per_class is None:
        per_class = _field_cache[cls] = {}
    cached = per_class.get(tag_key)
    if cached is not None:
        return cached

    descriptors = []
    for f in dataclasses.fields(cls):
        if f.name.startswith("_"):
            continue
        directive = parse_tag(f.metadata.get(tag_key))
        descriptors.append(
            FieldDescriptor(
                name=directive.name or f.name,
                attr=f.name,
                omit_empty=directive.omit_empty,
                quoted=directive.quoted,
            )
        )

    result = tuple(descriptors)
    per_class[tag_key] = result
    return result
