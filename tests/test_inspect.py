"""
Runtime shape classification tests.
"""

import gc
import weakref
from collections import OrderedDict
from collections import deque
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any

import pytest

from tagson import Kind
from tagson._inspect import FieldDescriptor
from tagson._inspect import classify
from tagson._inspect import deref
from tagson._inspect import is_empty
from tagson._inspect import struct_fields
from tagson._inspect import structural_kind


@dataclass
class Point:
    x: int = 0
    y: int = field(default=0, metadata={"json": "posY,omitempty"})
    z: int = field(default=0, metadata={"json": ",string", "alt": "zed"})
    _cache: int = 0


@dataclass
class SelfEncoding:
    value: int = 0

    def marshal_json(self) -> bytes:
        return b"0"


@pytest.mark.parametrize(
    "value,kind",
    [
        (True, Kind.BOOL),
        (False, Kind.BOOL),
        (0, Kind.UNSIGNED_INTEGER),
        (7, Kind.UNSIGNED_INTEGER),
        (-7, Kind.SIGNED_INTEGER),
        (1.5, Kind.FLOAT),
        ("s", Kind.STRING),
        (b"b", Kind.BYTE_SEQUENCE),
        (bytearray(), Kind.BYTE_SEQUENCE),
        (memoryview(b"m"), Kind.BYTE_SEQUENCE),
        ([], Kind.SEQUENCE),
        ((1,), Kind.SEQUENCE),
        (range(3), Kind.SEQUENCE),
        ({}, Kind.MAP),
        (OrderedDict(), Kind.MAP),
        (MappingProxyType({}), Kind.MAP),
        (Point(), Kind.STRUCT),
        (None, Kind.REFERENCE),
        (SelfEncoding(), Kind.CUSTOM),
        (deque(), Kind.SEQUENCE),
        ({1}, Kind.UNSUPPORTED),
        (1j, Kind.UNSUPPORTED),
        (len, Kind.UNSUPPORTED),
        (Point, Kind.UNSUPPORTED),
        (SelfEncoding, Kind.UNSUPPORTED),
    ],
)
def test_classify(value: Any, kind: Kind) -> None:
    """
    Validates each supported shape maps to exactly one kind.
    """
    assert classify(value) is kind


def test_weakref_is_reference() -> None:
    """
    Validates weak references classify and dereference like pointers.
    """
    target = Point(1)
    ref = weakref.ref(target)
    assert classify(ref) is Kind.REFERENCE
    assert deref(ref) is target
    assert deref(None) is None


def test_structural_kind_ignores_hook() -> None:
    """
    Validates structural_kind sees through marshal_json.
    """
    assert structural_kind(SelfEncoding()) is Kind.STRUCT


@pytest.mark.parametrize(
    "value,empty",
    [
        (False, True),
        (True, False),
        (0, True),
        (0.0, True),
        (-0.0, True),
        (3, False),
        ("", True),
        ("x", False),
        (b"", True),
        ([], True),
        ([0], False),
        ((), True),
        ({}, True),
        ({"a": 0}, False),
        (None, True),
        (Point(), False),
        (SelfEncoding(), False),
    ],
)
def test_is_empty(value: Any, empty: bool) -> None:
    """
    Validates the per-kind emptiness rules used by omitempty.
    """
    assert is_empty(value) is empty


def test_dead_weakref_is_empty() -> None:
    """
    Validates a collected referent counts as empty.
    """
    target = Point()
    ref = weakref.ref(target)
    assert not is_empty(ref)
    del target
    assert is_empty(ref)


def test_struct_fields() -> None:
    """
    Validates descriptors follow declaration order and skip private fields.
    """
    fields = struct_fields(Point, "json")
    assert fields == (
        FieldDescriptor("x", "x"),
        FieldDescriptor("posY", "y", omit_empty=True),
        FieldDescriptor("z", "z", quoted=True),
    )
    assert fields[1].value_of(Point(y=4)) == 4


def test_struct_fields_cached_per_tag_key() -> None:
    """
    Validates descriptors are computed once per type and tag key.
    """
    assert struct_fields(Point, "json") is struct_fields(Point, "json")

    alt = struct_fields(Point, "alt")
    assert [f.name for f in alt] == ["x", "y", "zed"]
    assert not any(f.omit_empty or f.quoted for f in alt)


def test_struct_fields_cache_does_not_keep_classes_alive() -> None:
    """
    Validates locally defined dataclasses can be collected after use.
    """

    def make_class() -> type:
        @dataclass
        class Local:
            x: int = 1

        return Local

    refs = []
    for _ in range(10):
        cls = make_class()
        assert [f.name for f in struct_fields(cls, "json")] == ["x"]
        refs.append(weakref.ref(cls))
    del cls

    gc.collect()
    assert all(ref() is None for ref in refs)
