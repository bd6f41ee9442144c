"""Tests for diff outcome counters."""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from kubediff import DiffError, UpdateSetting, diff


def _sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_outcomes_are_counted() -> None:
    changed_before = _sample("kubediff_diff_calls_total", outcome="changed")
    unchanged_before = _sample("kubediff_diff_calls_total", outcome="unchanged")
    error_before = _sample("kubediff_diff_calls_total", outcome="error")
    selector_errors_before = _sample("kubediff_selector_errors_total")

    diff({"a": 1}, {"a": 2}, UpdateSetting(fields=("a",)))
    diff({"a": 1}, {"a": 1}, UpdateSetting(fields=("a",)))
    with pytest.raises(DiffError):
        diff({"a": 1}, {"a": 1}, UpdateSetting(fields=("a>", "b>")))

    assert _sample("kubediff_diff_calls_total", outcome="changed") == changed_before + 1
    assert _sample("kubediff_diff_calls_total", outcome="unchanged") == unchanged_before + 1
    assert _sample("kubediff_diff_calls_total", outcome="error") == error_before + 1
    assert _sample("kubediff_selector_errors_total") == selector_errors_before + 2
