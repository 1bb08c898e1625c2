"""
Encoder callables under comparison, normalized to compact sorted output.

Encoders without native dataclass or bytes support get a fallback that
mirrors what tagson does for those kinds (without field tags).
"""

import base64
import dataclasses
import json
from collections.abc import Callable
from typing import Any

import orjson
import ujson  # type: ignore[import-untyped]

import tagson


def _fallback(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, bytes | bytearray):
        return base64.b64encode(obj).decode("ascii")
    raise TypeError(f"Object of type {type(obj).__name__} is not handled")


def stdlib_json_encode(value: Any) -> bytes:
    return json.dumps(
        value, separators=(",", ":"), sort_keys=True, default=_fallback
    ).encode("utf-8")


def orjson_encode(value: Any) -> bytes:
    return orjson.dumps(
        value, option=orjson.OPT_SORT_KEYS, default=_fallback
    )


def ujson_encode(value: Any) -> bytes:
    return ujson.dumps(
        value, sort_keys=True, ensure_ascii=False, default=_fallback
    ).encode("utf-8")


ENCODERS: list[tuple[str, Callable[[Any], bytes]]] = [
    ("stdlib_json", stdlib_json_encode),
    ("orjson", orjson_encode),
    ("ujson", ujson_encode),
    ("tagson", tagson.marshal),
]
