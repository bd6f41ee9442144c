r"""Parser for field selectors.

A selector addresses a location inside an object tree::

    spec.containers[*].image
    metadata.annotations.app\.kubernetes\.io\/version
    metadata.labels['app.kubernetes.io/name']
    status.conditions[-1].type
    spec.ports[0:2].port

Grammar (informal)::

    selector  := ["$"] ["."] segment ("." segment | bracket)*
    segment   := "*" | name | bracket
    name      := (letter | digit | "_" | "-" | "\" any)+
    bracket   := "[" ( "*" | int | [int] ":" [int] | quoted ) "]"

Any character other than a letter, digit, ``_`` or ``-`` must be escaped
with a backslash to be part of a field name.  Anything else is rejected
with :class:`~kubediff.errors.SelectorSyntaxError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from kubediff.errors import SelectorSyntaxError

_INDEX_RE = re.compile(r"^-?\d+$")
_SLICE_RE = re.compile(r"^(-?\d+)?:(-?\d+)?$")

_DEFAULT_CACHE_SIZE = 256


@dataclass(frozen=True)
class Field:
    """Mapping key lookup."""

    name: str


@dataclass(frozen=True)
class Wildcard:
    """Every element of a list, or every value of a mapping."""


@dataclass(frozen=True)
class Index:
    """Single list element; negative values count from the end."""

    index: int


@dataclass(frozen=True)
class Slice:
    """Half-open list range ``[start:end]``."""

    start: int | None
    end: int | None


Segment = Field | Wildcard | Index | Slice


@dataclass(frozen=True)
class Selector:
    """A parsed selector: the original text plus its path segments."""

    text: str
    segments: tuple[Segment, ...]


def describe_char(ch: str) -> str:
    """Format a character as ``U+003E '>'`` for diagnostics."""
    return f"U+{ord(ch):04X} '{ch}'"


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_-"


class _Parser:
    """Single-pass scanner over one selector string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._segments: list[Segment] = []

    # ------------------------------------------------------------------
    # Scanner primitives
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _error(self, message: str, token: str | None = None, position: int | None = None) -> SelectorSyntaxError:
        pos = self._pos if position is None else position
        tok = self._peek() if token is None else token
        return SelectorSyntaxError(self._text, tok, pos, message)

    def _unrecognized(self) -> SelectorSyntaxError:
        return self._error(f"unrecognized character in action: {describe_char(self._peek())}")

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> Selector:
        if not self._text.strip():
            raise self._error("empty selector", token="")

        # Optional root marker: "$.spec", "$[0]", ".spec"
        if self._text.startswith("$") and self._text[1:2] in (".", "["):
            self._pos = 1
        if self._peek() == ".":
            self._pos += 1

        if self._peek() == "[":
            self._parse_bracket()
        else:
            self._parse_name()

        while not self._at_end():
            ch = self._peek()
            if ch == ".":
                self._pos += 1
                self._parse_name()
            elif ch == "[":
                self._parse_bracket()
            else:
                raise self._unrecognized()

        return Selector(text=self._text, segments=tuple(self._segments))

    def _parse_name(self) -> None:
        if self._peek() == "*":
            self._pos += 1
            self._segments.append(Wildcard())
            return

        start = self._pos
        chars: list[str] = []
        while not self._at_end():
            ch = self._peek()
            if ch == "\\":
                if self._pos + 1 >= len(self._text):
                    raise self._error("incomplete escape sequence", token=ch)
                chars.append(self._text[self._pos + 1])
                self._pos += 2
            elif _is_name_char(ch):
                chars.append(ch)
                self._pos += 1
            else:
                break

        if self._pos == start:
            if self._at_end() or self._peek() in ".[":
                raise self._error("empty field name", token=self._peek())
            raise self._unrecognized()
        self._segments.append(Field("".join(chars)))

    def _parse_bracket(self) -> None:
        open_pos = self._pos
        self._pos += 1  # "["
        ch = self._peek()

        if ch in ("'", '"'):
            key = self._parse_quoted(ch)
            if self._peek() != "]":
                raise self._error("unclosed array expect ]", token="[", position=open_pos)
            self._pos += 1
            self._segments.append(Field(key))
            return

        close = self._text.find("]", self._pos)
        if close == -1:
            raise self._error("unclosed array expect ]", token="[", position=open_pos)
        body = self._text[self._pos : close].strip()
        body_pos = self._pos
        self._pos = close + 1

        if body == "*":
            self._segments.append(Wildcard())
        elif _INDEX_RE.match(body):
            self._segments.append(Index(int(body)))
        elif match := _SLICE_RE.match(body):
            start, end = match.groups()
            self._segments.append(Slice(int(start) if start else None, int(end) if end else None))
        else:
            raise self._error("invalid array index", token=body, position=body_pos)

    def _parse_quoted(self, quote: str) -> str:
        start = self._pos
        self._pos += 1
        chars: list[str] = []
        while not self._at_end():
            ch = self._peek()
            if ch == "\\" and self._pos + 1 < len(self._text):
                chars.append(self._text[self._pos + 1])
                self._pos += 2
            elif ch == quote:
                self._pos += 1
                return "".join(chars)
            else:
                chars.append(ch)
                self._pos += 1
        raise self._error("unterminated quoted key", token=quote, position=start)


def _parse(text: str) -> Selector:
    return _Parser(text).parse()


_parse_cached = lru_cache(maxsize=_DEFAULT_CACHE_SIZE)(_parse)


def parse_selector(text: str) -> Selector:
    """Parse *text* into a :class:`Selector`.

    Results are memoised; selectors come from static configuration and are
    evaluated against every update of every watched object.

    Raises:
        SelectorSyntaxError: if *text* is not a valid selector.
    """
    return _parse_cached(text)


def set_cache_size(size: int) -> None:
    """Replace the parse cache with one holding at most *size* selectors (0 disables it)."""
    global _parse_cached
    _parse_cached = lru_cache(maxsize=size)(_parse)
