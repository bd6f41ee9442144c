"""kubediff: report which watched fields changed between two object snapshots.

Given the old and new version of a Kubernetes object and an
:class:`UpdateSetting` listing field selectors, :func:`diff` returns a short
text block describing the first watched field that changed, ``""`` when
none did, or raises :class:`DiffError` listing every selector that could not
be evaluated.

Example::

    >>> settings = UpdateSetting(fields=("spec.containers[*].image",))
    >>> print(diff(old_deployment, new_deployment, settings))
    spec.containers[*].image:
    	-: nginx:1.14
    	+: nginx:latest
"""

from kubediff.differ import (
    describe_error,
    detect_changes,
    diff,
    diff_field,
    format_change,
    format_errors,
    has_changed,
)
from kubediff.errors import DiffError, KubeDiffError, SelectorSyntaxError
from kubediff.models import (
    NONE_PLACEHOLDER,
    NOT_FOUND,
    Changed,
    DiffResult,
    FieldErrors,
    Found,
    NoChange,
    SelectorError,
    UpdateSetting,
)
from kubediff.selector import evaluate, parse_selector, render
from kubediff.tree import to_tree

__version__ = "0.1.0"

__all__ = [
    "NONE_PLACEHOLDER",
    "NOT_FOUND",
    "Changed",
    "DiffError",
    "DiffResult",
    "FieldErrors",
    "Found",
    "KubeDiffError",
    "NoChange",
    "SelectorError",
    "SelectorSyntaxError",
    "UpdateSetting",
    "describe_error",
    "detect_changes",
    "diff",
    "diff_field",
    "evaluate",
    "format_change",
    "format_errors",
    "has_changed",
    "parse_selector",
    "render",
    "to_tree",
]
