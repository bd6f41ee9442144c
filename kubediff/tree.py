"""Conversion of snapshot objects into a canonical value tree.

Selectors are evaluated against plain ``dict`` / ``list`` / scalar trees.
Snapshots arrive in several shapes: decoded JSON, dataclasses used in tests
and tooling, or models from the official ``kubernetes`` client.  This module
turns all of them into the same tree without touching the originals.

Kubernetes client models are recognised structurally (``attribute_map`` and
``openapi_types`` class attributes), so the client library is not imported.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import cast

# Canonical tree node
TreeValue = dict[str, object] | list[object] | str | int | float | bool | None

_SCALARS = (str, int, float, bool)


def to_tree(obj: object) -> TreeValue:
    """Return a canonical tree equivalent of *obj*.

    Raises:
        TypeError: if *obj* (or anything nested in it) has no tree form.
    """
    if isinstance(obj, Enum):
        return to_tree(obj.value)
    if obj is None or isinstance(obj, _SCALARS):
        return cast(TreeValue, obj)
    if isinstance(obj, datetime | date):
        return obj.isoformat()
    if isinstance(obj, Mapping):
        return {str(k): to_tree(v) for k, v in obj.items()}
    if isinstance(obj, list | tuple):
        return [to_tree(item) for item in obj]
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _dataclass_to_tree(obj)
    if _is_openapi_model(obj):
        return _openapi_model_to_tree(obj)

    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_tree(to_dict())

    raise TypeError(f"Cannot convert {type(obj).__name__} to a diffable tree")


def _dataclass_to_tree(obj: object) -> dict[str, object]:
    # dataclasses.asdict() would deep-copy and lose json name metadata
    tree: dict[str, object] = {}
    for f in dataclasses.fields(obj):  # type: ignore[arg-type]
        name = f.metadata.get("json", f.name)
        tree[name] = to_tree(getattr(obj, f.name))
    return tree


def _is_openapi_model(obj: object) -> bool:
    cls = type(obj)
    return isinstance(getattr(cls, "attribute_map", None), dict) and isinstance(
        getattr(cls, "openapi_types", None), dict
    )


def _openapi_model_to_tree(obj: object) -> dict[str, object]:
    """Key a kubernetes client model by its API (camelCase) field names."""
    attribute_map: dict[str, str] = type(obj).attribute_map  # type: ignore[attr-defined]
    tree: dict[str, object] = {}
    for attr, json_name in attribute_map.items():
        value = getattr(obj, attr, None)
        if value is None:
            continue
        tree[json_name] = to_tree(value)
    return tree
