"""Shared fixtures for kubediff integration tests.

Exercises the full path: tree conversion -> selector evaluation ->
aggregation -> formatting, over typed snapshots from ``snapshots``.
"""

from __future__ import annotations

import pytest

from tests.integration.snapshots import Container, Object, Other, Spec


@pytest.fixture
def nginx_deployment_pair() -> tuple[Object, Object]:
    """Old/new snapshots differing only in the container image."""
    old = Object(spec=Spec(containers=[Container(image="nginx:1.14")]), other=Other(foo="bar"))
    new = Object(spec=Spec(containers=[Container(image="nginx:latest")]), other=Other(foo="bar"))
    return old, new
