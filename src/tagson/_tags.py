"""
Field tag parsing.

A tag is the string stored under the configured key (``"json"`` by default)
in a dataclass field's metadata::

    @dataclass
    class Point:
        x: int = field(metadata={"json": "posX,omitempty"})
        y: int = field(metadata={"json": ",string"})

The part before the first comma renames the field; the rest are options.
"""

from typing import NamedTuple

OMITEMPTY = "omitempty"
STRING = "string"

KNOWN_OPTIONS = frozenset({OMITEMPTY, STRING})

_EXTRA_NAME_CHARS = frozenset("$-_")


class TagDirective(NamedTuple):
    """Parsed form of a field tag."""

    name: str | None
    options: frozenset[str]

    @property
    def omit_empty(self) -> bool:
        return OMITEMPTY in self.options

    @property
    def quoted(self) -> bool:
        return STRING in self.options


def is_valid_tag_name(name: str) -> bool:
    """Reports whether name may be used as an output key override."""
    if not name:
        return False
    return all(
        c in _EXTRA_NAME_CHARS or c.isalpha() or c.isdecimal() for c in name
    )


def parse_tag(tag: str | None) -> TagDirective:
    """
    Splits a tag into its name override and recognized options.

    Malformed names fall back to None (use the field's own name) and
    unknown options are dropped. This never raises.
    """
    if not tag:
        return TagDirective(None, frozenset())

    name, _, rest = tag.partition(",")
    options = frozenset(opt for opt in rest.split(",") if opt in KNOWN_OPTIONS)
    return TagDirective(name if is_valid_tag_name(name) else None, options)
