"""Per-selector comparison of two snapshots."""

from __future__ import annotations

from kubediff.errors import SelectorSyntaxError
from kubediff.models.diff import NOT_FOUND, Changed, DiffOutcome, FieldErrors, NoChange, SelectorError
from kubediff.observability.logging import get_logger
from kubediff.selector.evaluator import evaluate, render
from kubediff.selector.parser import parse_selector

_logger = get_logger("differ.field")


def diff_field(old_obj: object, new_obj: object, selector: str) -> DiffOutcome:
    """Compare the value at *selector* in *old_obj* and *new_obj*.

    Both objects are expected to be canonical trees (see
    :func:`kubediff.tree.to_tree`).  Values are compared by their rendered
    form.  A selector that cannot be parsed yields :class:`FieldErrors`
    rather than raising, so callers can keep going with other selectors.
    """
    try:
        parsed = parse_selector(selector)
    except SelectorSyntaxError as exc:
        return FieldErrors((SelectorError(selector=selector, cause=exc),))

    old_result = evaluate(old_obj, parsed)
    new_result = evaluate(new_obj, parsed)
    if old_result is NOT_FOUND and new_result is NOT_FOUND:
        return NoChange()

    old_rendered = render(old_result)
    new_rendered = render(new_result)
    if old_rendered == new_rendered:
        return NoChange()

    # Values may hold Secret or ConfigMap data; only the path is logged
    _logger.debug("field_changed", selector=selector)
    return Changed(path=selector, old_rendered=old_rendered, new_rendered=new_rendered)
