"""Evaluation results and per-selector diff outcomes.

``EvaluationResult`` is either :class:`Found` (one or more matched values)
or the :data:`NOT_FOUND` singleton.  A field that is absent and a field that
is explicitly ``null`` are not distinguished; both are ``NOT_FOUND``.

``DiffOutcome`` is what the field differ returns for a single selector:
:class:`NoChange`, :class:`Changed` or :class:`FieldErrors`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from kubediff.errors import SelectorSyntaxError

# Rendering of a value that could not be found
NONE_PLACEHOLDER: Final = "<none>"


class _NotFound:
    """Sentinel type for a selector that did not resolve."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = _NotFound()


@dataclass(frozen=True)
class Found:
    """Values matched by a selector.

    A plain path yields a single value; wildcard segments may yield several,
    kept in document order.  ``None`` appears only among several values.
    """

    values: tuple[object, ...]


EvaluationResult = Found | _NotFound


@dataclass(frozen=True)
class SelectorError:
    """A selector that failed to parse, and so was not evaluated at all."""

    selector: str
    cause: SelectorSyntaxError


@dataclass(frozen=True)
class NoChange:
    """The selector rendered identically on both snapshots."""


@dataclass(frozen=True)
class Changed:
    """The selector's rendered value differs between the snapshots."""

    path: str
    old_rendered: str
    new_rendered: str


@dataclass(frozen=True)
class FieldErrors:
    """The selector failed to evaluate."""

    errors: tuple[SelectorError, ...]


DiffOutcome = NoChange | Changed | FieldErrors


@dataclass(frozen=True)
class DiffResult:
    """Aggregated result of running every configured selector.

    ``change`` is the first change in selector order, ``errors`` holds every
    evaluation failure in selector order.
    """

    change: Changed | None = None
    errors: tuple[SelectorError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors
