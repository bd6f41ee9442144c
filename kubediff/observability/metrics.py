"""Prometheus metrics for the diff engine.

All counters live in the default registry so that a host process exposing
``/metrics`` picks them up without extra wiring.
"""

from __future__ import annotations

from prometheus_client import Counter

diff_calls_total = Counter(
    "kubediff_diff_calls_total",
    "Diff calls by outcome (changed, unchanged, error).",
    ["outcome"],
)

selector_errors_total = Counter(
    "kubediff_selector_errors_total",
    "Selectors that failed to parse during a diff call.",
)
