"""Selector-driven diff of two object snapshots.

:func:`detect_changes` runs every selector of an :class:`UpdateSetting` and
collects the outcome; :func:`diff` turns that into the text contract used
by notification senders:

* ``""``            -- nothing changed in any watched field;
* diff text         -- exactly one change, the first in selector order;
* ``DiffError``     -- at least one selector failed.  Errors win over a
                       change found by another selector, so that broken
                       selectors are never hidden behind a successful diff.
"""

from __future__ import annotations

from kubediff.differ.field import diff_field
from kubediff.differ.report import format_change
from kubediff.errors import DiffError
from kubediff.models.config import UpdateSetting
from kubediff.models.diff import Changed, DiffResult, FieldErrors, SelectorError
from kubediff.observability.logging import get_logger
from kubediff.observability.metrics import diff_calls_total, selector_errors_total
from kubediff.tree import to_tree

_logger = get_logger("differ.aggregate")


def detect_changes(old_obj: object, new_obj: object, settings: UpdateSetting) -> DiffResult:
    """Evaluate every selector in *settings* and collect changes and errors.

    Every selector is attempted even after earlier ones failed.  Only the
    first change is kept.  Never raises for selector failures; those are
    returned in ``DiffResult.errors``.

    Raises:
        TypeError: if a snapshot cannot be converted to an object tree.
    """
    old_tree = to_tree(old_obj)
    new_tree = to_tree(new_obj)

    first_change: Changed | None = None
    errors: list[SelectorError] = []

    for selector in settings.fields:
        outcome = diff_field(old_tree, new_tree, selector)
        if isinstance(outcome, FieldErrors):
            for err in outcome.errors:
                selector_errors_total.inc()
                _logger.warning(
                    "selector_evaluation_failed",
                    selector=err.selector,
                    token=err.cause.token,
                    position=err.cause.position,
                    error=err.cause.message,
                )
            errors.extend(outcome.errors)
        elif isinstance(outcome, Changed) and first_change is None:
            first_change = outcome

    return DiffResult(change=first_change, errors=tuple(errors))


def diff(old_obj: object, new_obj: object, settings: UpdateSetting) -> str:
    """Return the diff text for the first changed selector, or ``""``.

    Raises:
        DiffError: if any selector failed to evaluate.  The message starts
            with ``while getting diff: `` and lists every failure.
    """
    result = detect_changes(old_obj, new_obj, settings)

    if result.errors:
        diff_calls_total.labels(outcome="error").inc()
        _logger.warning(
            "diff_failed",
            error_count=len(result.errors),
            change_discarded=result.change is not None,
        )
        raise DiffError(result.errors)

    if result.change is None:
        diff_calls_total.labels(outcome="unchanged").inc()
        _logger.debug("diff_completed", changed=False, selectors=len(settings.fields))
        return ""

    diff_calls_total.labels(outcome="changed").inc()
    _logger.debug("diff_completed", changed=True, path=result.change.path, include_diff=settings.include_diff)
    return format_change(result.change)


def has_changed(old_obj: object, new_obj: object, settings: UpdateSetting) -> bool:
    """Return True if any watched field changed.

    For callers that configured ``include_diff=False`` and only need the
    verdict.  Raises :class:`DiffError` under the same conditions as
    :func:`diff`.
    """
    return diff(old_obj, new_obj, settings) != ""
