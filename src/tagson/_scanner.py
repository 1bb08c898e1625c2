"""
Strict JSON scanner backing compact, indent and valid.

The lexer splits text into tokens and the validator walks them against the
RFC 4627 grammar with an explicit container stack, so every operation here
either sees a complete, well-formed token stream or raises JSONSyntaxError
with the position of the first problem.
"""

from dataclasses import dataclass
from enum import Enum

from ._errors import JSONSyntaxError
from ._profile import ProfileContext

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_SIMPLE_ESCAPES = '"\\/bfnrt'
_CONTROL_LIMIT = " "
_SURROGATE_MIN = chr(0xD800)
_SURROGATE_MAX = chr(0xDFFF)


class TokenType(Enum):
    """Token categories produced by the lexer."""

    OBJECT_START = "object_start"
    OBJECT_END = "object_end"
    ARRAY_START = "array_start"
    ARRAY_END = "array_end"
    COMMA = "comma"
    COLON = "colon"
    STRING = "string"
    NUMBER = "number"
    LITERAL = "literal"


_STRUCTURAL = {
    "{": TokenType.OBJECT_START,
    "}": TokenType.OBJECT_END,
    "[": TokenType.ARRAY_START,
    "]": TokenType.ARRAY_END,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}

_OPENERS = frozenset({TokenType.OBJECT_START, TokenType.ARRAY_START})
_CLOSERS = frozenset({TokenType.OBJECT_END, TokenType.ARRAY_END})


@dataclass(frozen=True)
class JsonToken:
    """A lexical token with its verbatim source text and span."""

    type: TokenType
    value: str
    start: int
    end: int


class JsonLexer:
    """
    Tokenizes JSON text.

    Character-by-character scanning. String tokens keep their quotes and
    escapes exactly as written so that compaction reproduces them verbatim.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else "\0"

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def skip_whitespace(self) -> None:
        while self.pos < self.length and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def _scan_escape(self, start: int) -> None:
        """Validates the escape sequence following a backslash."""
        backslash = self.pos - 1
        if self.pos >= self.length:
            raise JSONSyntaxError(
                "Unterminated string starting at", self.text, start
            )

        esc = self.advance()
        if esc in _SIMPLE_ESCAPES:
            return
        if esc == "u":
            digits = self.text[self.pos : self.pos + 4]
            if len(digits) == 4 and all(c in _HEX_DIGITS for c in digits):
                self.pos += 4
                return
            raise JSONSyntaxError(
                "Invalid \\uXXXX escape", self.text, backslash
            )
        raise JSONSyntaxError("Invalid \\escape", self.text, backslash)

    def scan_string(self) -> JsonToken:
        """Scans a JSON string token including quotes."""
        with ProfileContext("scan_string"):
            start = self.pos
            if self.advance() != '"':
                raise JSONSyntaxError("Expected string", self.text, start)

            while self.pos < self.length:
                char = self.advance()
                if char == '"':
                    return JsonToken(
                        TokenType.STRING,
                        self.text[start : self.pos],
                        start,
                        self.pos,
                    )
                elif char == "\\":
                    self._scan_escape(start)
                elif char < _CONTROL_LIMIT:
                    raise JSONSyntaxError(
                        "Invalid control character in string",
                        self.text,
                        self.pos - 1,
                    )
                elif _SURROGATE_MIN <= char <= _SURROGATE_MAX:
                    raise JSONSyntaxError(
                        "Invalid UTF-8", self.text, self.pos - 1
                    )

            raise JSONSyntaxError(
                "Unterminated string starting at", self.text, start
            )

    def _scan_integer_part(self, start: int) -> None:
        if self.peek() not in _DIGITS:
            raise JSONSyntaxError("Invalid number", self.text, start)

        if self.peek() == "0":
            self.advance()
            if self.peek() in _DIGITS:
                raise JSONSyntaxError(
                    "Leading zeros not allowed", self.text, start
                )
        else:
            while self.peek() in _DIGITS:
                self.advance()

    def _scan_fraction_part(self, start: int) -> None:
        if self.peek() == ".":
            self.advance()
            if self.peek() not in _DIGITS:
                raise JSONSyntaxError(
                    "Invalid decimal number", self.text, start
                )
            while self.peek() in _DIGITS:
                self.advance()

    def _scan_exponent_part(self, start: int) -> None:
        if self.peek() in "eE":
            self.advance()
            if self.peek() in "+-":
                self.advance()
            if self.peek() not in _DIGITS:
                raise JSONSyntaxError("Invalid exponent", self.text, start)
            while self.peek() in _DIGITS:
                self.advance()

    def scan_number(self) -> JsonToken:
        """Scans a JSON number token."""
        with ProfileContext("scan_number"):
            start = self.pos
            if self.peek() == "-":
                self.advance()

            self._scan_integer_part(start)
            self._scan_fraction_part(start)
            self._scan_exponent_part(start)

            return JsonToken(
                TokenType.NUMBER, self.text[start : self.pos], start, self.pos
            )

    def scan_literal(self) -> JsonToken:
        """Scans literal tokens: true, false, null."""
        start = self.pos
        for literal in ("true", "false", "null"):
            if self.text.startswith(literal, start):
                self.pos += len(literal)
                return JsonToken(TokenType.LITERAL, literal, start, self.pos)
        raise JSONSyntaxError("Expecting value", self.text, start)

    def next_token(self) -> JsonToken | None:
        """Returns the next token or None if at end."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return None

        char = self.peek()
        start = self.pos

        if char in _STRUCTURAL:
            self.advance()
            return JsonToken(_STRUCTURAL[char], char, start, self.pos)
        elif char == '"':
            return self.scan_string()
        elif char in _DIGITS or char == "-":
            return self.scan_number()
        elif char in "tfn":
            return self.scan_literal()
        else:
            raise JSONSyntaxError("Expecting value", self.text, self.pos)


class JsonValidator:
    """
    Checks a token stream against the JSON grammar.

    Open containers are tracked on an explicit stack of expected closers
    rather than by recursion, so nesting depth is limited only by memory.
    Accepted tokens are collected in order, so after validate() returns,
    ``tokens`` is exactly the document minus insignificant whitespace.
    """

    def __init__(self, lexer: JsonLexer):
        self.lexer = lexer
        self.current_token: JsonToken | None = None
        self.tokens: list[JsonToken] = []
        self.stack: list[str] = []

    def advance_token(self) -> JsonToken | None:
        self.current_token = self.lexer.next_token()
        return self.current_token

    def _accept(self) -> None:
        """Records the current token and moves past it."""
        assert self.current_token is not None
        self.tokens.append(self.current_token)
        self.advance_token()

    def expect_token(self, expected_value: str) -> None:
        token = self.current_token
        if not token or token.value != expected_value:
            raise JSONSyntaxError(
                f"Expecting '{expected_value}' delimiter",
                self.lexer.text,
                token.start if token else self.lexer.pos,
            )
        self._accept()

    def validate(self) -> list[JsonToken]:
        """Validates the whole document and returns its tokens."""
        with ProfileContext("validate", self.lexer.length):
            self.advance_token()
            self.validate_value()

            while self.stack:
                closer = self.stack[-1]
                what = "object" if closer == "}" else "array"
                if self._continue_container(closer, what):
                    if closer == "}":
                        self._validate_member_head()
                    self.validate_value()
                else:
                    self.stack.pop()

            if self.current_token:
                raise JSONSyntaxError(
                    "Extra data", self.lexer.text, self.current_token.start
                )
            return self.tokens

    def validate_value(self) -> None:
        """
        Consumes one value or the head of a non-empty container.

        A scalar or an empty container is consumed whole. Otherwise the
        opener (plus the first key and colon for objects) is consumed and
        its closer pushed, and the loop continues with the first member.
        """
        while True:
            token = self.current_token
            if not token:
                raise JSONSyntaxError(
                    "Expecting value", self.lexer.text, self.lexer.pos
                )

            if token.type in (
                TokenType.LITERAL,
                TokenType.STRING,
                TokenType.NUMBER,
            ):
                self._accept()
                return
            elif token.type is TokenType.OBJECT_START:
                closer = "}"
            elif token.type is TokenType.ARRAY_START:
                closer = "]"
            else:
                raise JSONSyntaxError(
                    "Expecting value", self.lexer.text, token.start
                )

            self._accept()
            if self.current_token and self.current_token.value == closer:
                self._accept()
                return

            self.stack.append(closer)
            if closer == "}":
                self._validate_member_head()

    def _validate_member_head(self) -> None:
        """Consumes an object key and the colon after it."""
        token = self.current_token
        if not token or token.type is not TokenType.STRING:
            raise JSONSyntaxError(
                "Expecting property name enclosed in double quotes",
                self.lexer.text,
                token.start if token else self.lexer.pos,
            )
        self._accept()
        self.expect_token(":")

    def _continue_container(self, closer: str, what: str) -> bool:
        """Consumes ',' or the closer; True if another member follows."""
        if not self.current_token:
            raise JSONSyntaxError(
                "Expecting ',' delimiter", self.lexer.text, self.lexer.pos
            )

        if self.current_token.value == closer:
            self._accept()
            return False
        elif self.current_token.value == ",":
            comma_pos = self.current_token.start
            self._accept()
            if self.current_token and self.current_token.value == closer:
                raise JSONSyntaxError(
                    f"Illegal trailing comma before end of {what}",
                    self.lexer.text,
                    comma_pos,
                )
            return True
        else:
            raise JSONSyntaxError(
                "Expecting ',' delimiter",
                self.lexer.text,
                self.current_token.start,
            )


def _decode(src: bytes | bytearray | memoryview | str) -> str:
    if isinstance(src, str):
        return src
    raw = bytes(src)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        valid_prefix = raw[: e.start].decode("utf-8")
        raise JSONSyntaxError(
            "Invalid UTF-8",
            raw.decode("utf-8", "replace"),
            len(valid_prefix),
        ) from e


def scan(src: bytes | bytearray | memoryview | str) -> list[JsonToken]:
    """Validates src as a single JSON document and returns its tokens."""
    return JsonValidator(JsonLexer(_decode(src))).validate()


def valid(data: bytes | bytearray | memoryview | str) -> bool:
    """Reports whether data is a single well-formed JSON document."""
    try:
        scan(data)
    except JSONSyntaxError:
        return False
    return True


def compact(dst: bytearray, src: bytes | bytearray | memoryview | str) -> None:
    """
    Appends src to dst with insignificant whitespace removed.

    Raises JSONSyntaxError if src is not valid JSON; dst is untouched then.
    """
    tokens = scan(src)
    dst += "".join(tok.value for tok in tokens).encode("utf-8")


def indent(
    dst: bytearray,
    src: bytes | bytearray | memoryview | str,
    prefix: str,
    indent: str,
) -> None:
    """
    Appends an indented form of the JSON document src to dst.

    Each element of an array or object begins on a new line starting with
    prefix followed by one copy of indent per nesting level. Empty arrays
    and objects stay on one line. The first line gets no prefix, so the
    output can be placed after other text on a line. Raises
    JSONSyntaxError if src is not valid JSON; dst is untouched then.
    """
    tokens = scan(src)
    out: list[str] = []
    depth = 0
    need_indent = False

    def newline() -> None:
        out.append("\n")
        out.append(prefix)
        out.append(indent * depth)

    for tok in tokens:
        if need_indent and tok.type not in _CLOSERS:
            need_indent = False
            depth += 1
            newline()

        if tok.type in _OPENERS:
            need_indent = True
            out.append(tok.value)
        elif tok.type in _CLOSERS:
            if need_indent:
                need_indent = False
            else:
                depth -= 1
                newline()
            out.append(tok.value)
        elif tok.type is TokenType.COMMA:
            out.append(",")
            newline()
        elif tok.type is TokenType.COLON:
            out.append(": ")
        else:
            out.append(tok.value)

    dst += "".join(out).encode("utf-8")
