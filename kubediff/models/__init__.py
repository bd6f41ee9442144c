"""Core data structures for kubediff."""

from kubediff.models.config import KubeDiffConfig, LogConfig, UpdateSetting
from kubediff.models.diff import (
    NONE_PLACEHOLDER,
    NOT_FOUND,
    Changed,
    DiffOutcome,
    DiffResult,
    EvaluationResult,
    FieldErrors,
    Found,
    NoChange,
    SelectorError,
)

__all__ = [
    "NONE_PLACEHOLDER",
    "NOT_FOUND",
    "Changed",
    "DiffOutcome",
    "DiffResult",
    "EvaluationResult",
    "FieldErrors",
    "Found",
    "KubeDiffConfig",
    "LogConfig",
    "NoChange",
    "SelectorError",
    "UpdateSetting",
]
