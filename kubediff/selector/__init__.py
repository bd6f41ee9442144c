"""Selector language for addressing fields inside object snapshots.

Submodules:
    parser    -- Selector grammar, parsed segment types and the parse cache.
    evaluator -- Evaluation against object trees and canonical rendering.
"""

from kubediff.selector.evaluator import evaluate, render, render_value
from kubediff.selector.parser import Selector, parse_selector

__all__ = [
    "Selector",
    "evaluate",
    "parse_selector",
    "render",
    "render_value",
]
