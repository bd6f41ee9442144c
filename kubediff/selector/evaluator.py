"""Selector evaluation and canonical value rendering.

:func:`evaluate` walks a parsed selector over an object tree (see
:mod:`kubediff.tree`) and returns every value it reaches.  A path that
leads nowhere is :data:`~kubediff.models.diff.NOT_FOUND`, never an error;
only malformed selectors raise.

:func:`render` produces the canonical string form used both to compare
old and new values and to display them.  Two values are "unchanged" when
their renderings are equal, so ``1`` and ``1.0`` compare equal (also when
nested in a mapping or list) while ``["a", "b"]`` and ``["a"]`` do not.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence

from kubediff.models.diff import NONE_PLACEHOLDER, NOT_FOUND, EvaluationResult, Found
from kubediff.selector.parser import Field, Index, Segment, Selector, Slice, Wildcard, parse_selector


def evaluate(obj: object, selector: str | Selector) -> EvaluationResult:
    """Evaluate *selector* against *obj*.

    Args:
        obj:      A canonical tree (mappings, lists and scalars).
        selector: Selector text or an already parsed :class:`Selector`.

    Returns:
        ``Found`` with the matched values in document order, or ``NOT_FOUND``
        when no non-null value is reachable.  When several values match,
        null elements are kept so that ``[null, "x"]`` differs from ``["x"]``.

    Raises:
        SelectorSyntaxError: if *selector* is text that fails to parse.
    """
    parsed = parse_selector(selector) if isinstance(selector, str) else selector

    nodes: list[object] = [obj]
    for segment in parsed.segments:
        nodes = [child for node in nodes for child in _step(node, segment)]
        if not nodes:
            return NOT_FOUND

    if all(v is None for v in nodes):
        return NOT_FOUND
    return Found(tuple(nodes))


def _is_list(node: object) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, str | bytes)


def _step(node: object, segment: Segment) -> Iterator[object]:
    """Yield the children of *node* addressed by *segment*."""
    if isinstance(segment, Field):
        if isinstance(node, Mapping) and segment.name in node:
            yield node[segment.name]
    elif isinstance(segment, Wildcard):
        if isinstance(node, Mapping):
            for key in sorted(node, key=str):
                yield node[key]
        elif _is_list(node):
            yield from node  # type: ignore[misc]
    elif isinstance(segment, Index):
        if _is_list(node):
            items: Sequence[object] = node  # type: ignore[assignment]
            if -len(items) <= segment.index < len(items):
                yield items[segment.index]
    elif isinstance(segment, Slice):
        if _is_list(node):
            items = node  # type: ignore[assignment]
            yield from items[segment.start : segment.end]


def render(result: EvaluationResult) -> str:

    """Return the canonical string form of *result*.

    ``NOT_FOUND`` renders as ``<none>``.  A single match renders as its
    value; several matches render as a compact JSON list, so that
    ``["--a --b"]`` and ``["--a", "--b"]`` stay distinguishable.
    """
    if not isinstance(result, Found):
        return NONE_PLACEHOLDER
    if len(result.values) == 1:
        return render_value(result.values[0])
    return _json_str(list(result.values))


def render_value(value: object) -> str:
    """Render one matched value."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, Mapping | list | tuple):
        return _json_str(value)
    return str(value)


def _json_str(value: object) -> str:
    return json.dumps(_canonical(value), separators=(",", ":"), sort_keys=True, ensure_ascii=False, default=str)


def _canonical(value: object) -> object:
    """Normalise integral floats to ints at any depth, matching render_value()."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {k: _canonical(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_canonical(v) for v in value]
    return value
