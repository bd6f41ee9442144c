"""Field diffing for Kubernetes object updates.

Submodules:
    field      -- Compare one selector across two snapshots.
    aggregate  -- Run all configured selectors and apply the result contract.
    report     -- Fixed text templates for changes and aggregated errors.
"""

from kubediff.differ.aggregate import detect_changes, diff, has_changed
from kubediff.differ.field import diff_field
from kubediff.differ.report import describe_error, format_change, format_errors

__all__ = [
    "describe_error",
    "detect_changes",
    "diff",
    "diff_field",
    "format_change",
    "format_errors",
    "has_changed",
]
