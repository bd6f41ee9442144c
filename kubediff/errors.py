"""Exception hierarchy for kubediff.

Exceptions keep their constructor arguments in ``args`` so that they can be
pickled, e.g. when a diff runs in a process pool worker.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kubediff.models.diff import SelectorError

DIFF_ERROR_BANNER = "while getting diff: "


class KubeDiffError(Exception):
    """Base class for every error raised by kubediff."""


class SelectorSyntaxError(KubeDiffError, ValueError):
    """Raised when a selector expression cannot be parsed.

    Attributes:
        selector: The full selector text as configured.
        token:    The offending character or token ("" at end of input).
        position: Zero-based offset of ``token`` within ``selector``.
        message:  Parser diagnostic, e.g.
                  ``unrecognized character in action: U+003E '>'``.
    """

    def __init__(self, selector: str, token: str, position: int, message: str) -> None:
        super().__init__(selector, token, position, message)
        self.selector = selector
        self.token = token
        self.position = position
        self.message = message

    def __str__(self) -> str:
        return self.message


class DiffError(KubeDiffError):
    """One or more selectors failed while computing a diff.

    The string form is the ``while getting diff:`` banner followed by one
    bullet per failed selector, in evaluation order.
    """

    def __init__(self, errors: Iterable[SelectorError]) -> None:
        self.errors: tuple[SelectorError, ...] = tuple(errors)
        super().__init__(self.errors)

    def __str__(self) -> str:
        from kubediff.differ.report import format_errors

        return DIFF_ERROR_BANNER + format_errors(self.errors)
