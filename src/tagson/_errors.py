"""Exception types raised by the encoder and the JSON scanner."""

from typing import Any


class JSONEncodeError(ValueError):
    """Base class for every failure raised while marshaling a value."""


class UnsupportedTypeError(JSONEncodeError, TypeError):
    """
    Raised when a value's kind has no JSON representation.

    Covers functions, generators, complex numbers, sets and mappings whose
    keys are not strings.
    """

    def __init__(self, type_: type, detail: str = "") -> None:
        self.type = type_
        msg = f"json: unsupported type: {_type_name(type_)}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class UnsupportedValueError(JSONEncodeError):
    """Raised for values of a supported kind that JSON cannot express."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        super().__init__(f"json: unsupported value: {reason}")


class InvalidUTF8Error(JSONEncodeError):
    """Raised when a string holds code points that cannot be UTF-8 encoded."""

    def __init__(self, s: str) -> None:
        self.s = s
        super().__init__(f"json: invalid UTF-8 in string: {s!r}")


class MarshalerError(JSONEncodeError):
    """
    Wraps a failure produced by a value's own marshal_json hook.

    Either the hook raised, returned something other than bytes or str, or
    returned text that is not valid JSON. The original exception is kept on
    ``error`` and chained as ``__cause__``.
    """

    def __init__(self, type_: type, error: BaseException) -> None:
        self.type = type_
        self.error = error
        super().__init__(
            f"json: error calling marshal_json for type "
            f"{_type_name(type_)}: {error}"
        )


class RecursionLimitExceeded(JSONEncodeError):
    """Raised when nesting goes deeper than the configured max_depth."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"json: nesting exceeds max_depth of {max_depth} "
            "(cyclic value?)"
        )


class JSONSyntaxError(ValueError):
    """
    Reports malformed JSON text with precise position information.

    Carries the offending document plus the character offset, line and
    column so callers of compact/indent can point at the problem.
    """

    def __init__(self, msg: str, doc: str = "", pos: int = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


def _type_name(type_: type) -> str:
    module = type_.__module__
    if module in ("builtins", "__main__"):
        return type_.__qualname__
    return f"{module}.{type_.__qualname__}"
