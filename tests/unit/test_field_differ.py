"""Tests for per-selector classification in diff_field()."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubediff.differ import field as field_module
from kubediff.differ.field import diff_field
from kubediff.errors import SelectorSyntaxError
from kubediff.models.diff import Changed, FieldErrors, NoChange


def _make_pod(image: str | None = "nginx:1.14", replicas: object = 1) -> dict[str, object]:
    container: dict[str, object] = {"name": "app"}
    if image is not None:
        container["image"] = image
    return {"spec": {"containers": [container]}, "status": {"replicas": replicas}}


class TestDiffField:
    def test_unchanged(self) -> None:
        assert diff_field(_make_pod(), _make_pod(), "spec.containers[*].image") == NoChange()

    def test_changed(self) -> None:
        outcome = diff_field(_make_pod(), _make_pod(image="nginx:latest"), "spec.containers[*].image")
        assert outcome == Changed(
            path="spec.containers[*].image",
            old_rendered="nginx:1.14",
            new_rendered="nginx:latest",
        )

    def test_both_missing_is_no_change(self) -> None:
        assert diff_field(_make_pod(), _make_pod(), "metadata.name") == NoChange()

    def test_added_value_renders_none_on_old_side(self) -> None:
        outcome = diff_field(_make_pod(image=None), _make_pod(), "spec.containers[*].image")
        assert outcome == Changed("spec.containers[*].image", "<none>", "nginx:1.14")

    def test_removed_value_renders_none_on_new_side(self) -> None:
        outcome = diff_field(_make_pod(), _make_pod(image=None), "spec.containers[*].image")
        assert outcome == Changed("spec.containers[*].image", "nginx:1.14", "<none>")

    def test_equal_rendering_across_types(self) -> None:
        assert diff_field(_make_pod(replicas=2), _make_pod(replicas=2.0), "status.replicas") == NoChange()

    def test_empty_string_differs_from_missing(self) -> None:
        outcome = diff_field({"data": {"k": ""}}, {"data": {}}, "data.k")
        assert outcome == Changed("data.k", "", "<none>")

    def test_syntax_error_is_collected(self) -> None:
        outcome = diff_field(_make_pod(), _make_pod(), "spec.>image")
        assert isinstance(outcome, FieldErrors)
        assert len(outcome.errors) == 1
        err = outcome.errors[0]
        assert err.selector == "spec.>image"
        assert isinstance(err.cause, SelectorSyntaxError)
        assert err.cause.token == ">"

    def test_differing_list_contents_are_changed(self) -> None:
        old = {"spec": {"args": ["--a --b"]}}
        new = {"spec": {"args": ["--a", "--b"]}}
        assert diff_field(old, new, "spec.args[*]") == Changed("spec.args[*]", "--a --b", '["--a","--b"]')

    def test_null_element_in_list_is_a_change(self) -> None:
        outcome = diff_field({"spec": {"args": [None, "x"]}}, {"spec": {"args": ["x"]}}, "spec.args[*]")
        assert outcome == Changed("spec.args[*]", '[null,"x"]', "x")

    def test_nested_integral_float_is_unchanged(self) -> None:
        assert diff_field({"spec": {"a": 1}}, {"spec": {"a": 1.0}}, "spec") == NoChange()


class TestDiffFieldLogging:
    @pytest.fixture
    def logger(self, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
        mock = MagicMock()
        monkeypatch.setattr(field_module, "_logger", mock)
        return mock

    def test_changed_values_are_not_logged(self, logger: MagicMock) -> None:
        old = {"data": {"password": "hunter2"}}
        new = {"data": {"password": "correct-horse"}}

        diff_field(old, new, "data.password")

        logger.debug.assert_called_once_with("field_changed", selector="data.password")
        logged = repr(logger.mock_calls)
        assert "hunter2" not in logged
        assert "correct-horse" not in logged


def test_malformed_selector_is_never_evaluated(monkeypatch: pytest.MonkeyPatch) -> None:
    evaluate = MagicMock()
    monkeypatch.setattr(field_module, "evaluate", evaluate)

    outcome = diff_field(_make_pod(), _make_pod(), "spec.>image")

    assert isinstance(outcome, FieldErrors)
    assert len(outcome.errors) == 1
    evaluate.assert_not_called()
