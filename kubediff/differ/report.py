"""Text rendering of diff results.

The output is shown verbatim in chat notifications, so the templates here
are fixed byte-for-byte::

    spec.containers[*].image:
    	-: nginx:1.14
    	+: nginx:latest

and, for failures (prefixed with ``while getting diff: `` by
:class:`~kubediff.errors.DiffError`)::

    2 errors occurred:
    	* while finding value in old obj from jsonpath "a..b": empty field name
    	* while finding value in old obj from jsonpath "c>": unrecognized ...
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from kubediff.models.diff import Changed, SelectorError


def format_change(change: Changed) -> str:
    """Render a single detected change."""
    return f"{change.path}:\n\t-: {change.old_rendered}\n\t+: {change.new_rendered}\n"


def describe_error(error: SelectorError) -> str:
    """One-line, human-readable cause for a failed selector.

    Parse failures surface while reading the old snapshot, the first one
    evaluated, so the cause always names the old object.
    """
    # Double-quoted with backslashes escaped, so `a\.b` shows as "a\\.b"
    quoted = json.dumps(error.selector, ensure_ascii=False)
    return f"while finding value in old obj from jsonpath {quoted}: {error.cause.message}"


def format_errors(errors: Sequence[SelectorError]) -> str:
    """Render failed selectors as a counted, bulleted list."""
    if len(errors) == 1:
        return f"1 error occurred:\n\t* {describe_error(errors[0])}"
    bullets = "\n\t".join(f"* {describe_error(e)}" for e in errors)
    return f"{len(errors)} errors occurred:\n\t{bullets}"
