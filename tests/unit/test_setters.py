"""Unit tests for declarative setters and the fold registry."""

import pytest

from squarekit.core.base_models import SquareModel
from squarekit.core.exceptions import UnregisteredFoldError
from squarekit.core.folds import FoldRegistry, registry
from squarekit.core.setters import add_unique, append, assign, compute, constant, resolve
from squarekit.objects import Order, OrderLineItem, OrderServiceCharge, TimeRange


class Window(SquareModel):
    range: TimeRange | None = None
    labels: list[str] | None = None
    open: bool | None = None


class Schedule(SquareModel):
    window: Window | None = None
    owner: str | None = None


class TestAssign:
    """Tests for assign setters."""

    def test_assign_top_level(self):
        body = Schedule()
        assign("owner").apply(body, "ops")

        assert body.owner == "ops"

    def test_assign_creates_intermediate_models(self):
        """Test that missing sub-objects on a dotted path are created."""
        body = Schedule()
        assign("window.range.start_at").apply(body, "2024-01-01T00:00:00Z")

        assert isinstance(body.window, Window)
        assert body.window.range.start_at == "2024-01-01T00:00:00Z"
        assert body.window.range.end_at is None

    def test_assign_keeps_existing_intermediates(self):
        body = Schedule(window=Window(labels=["a"]))
        assign("window.open").apply(body, True)

        assert body.window.labels == ["a"]
        assert body.window.open is True

    def test_resolve_rejects_non_model_segment(self):
        """Test that walking through a scalar field is a TypeError."""
        with pytest.raises(TypeError):
            resolve(Schedule(), "owner.name")


class TestAppend:
    """Tests for append and add_unique setters."""

    def test_append_initialises_list(self):
        body = Schedule()
        append("window.labels").apply(body, "a")

        assert body.window.labels == ["a"]

    def test_append_keeps_call_order(self):
        body = Schedule()
        spec = append("window.labels")
        for label in ("b", "a", "b"):
            spec.apply(body, label)

        assert body.window.labels == ["b", "a", "b"]

    def test_add_unique_is_idempotent(self):
        body = Schedule()
        spec = add_unique("window.labels")
        for label in ("a", "b", "a"):
            spec.apply(body, label)

        assert body.window.labels == ["a", "b"]


class TestConstantAndCompute:
    """Tests for constant and compute setters."""

    def test_constant(self):
        body = Schedule()
        constant("window.open", False).apply(body)

        assert body.window.open is False

    def test_compute_receives_all_arguments(self):
        def set_range(body, start, end):
            assign("window.range").apply(body, TimeRange(start_at=start, end_at=end))

        body = Schedule()
        compute(set_range).apply(body, "s", "e")

        assert body.window.range == TimeRange(start_at="s", end_at="e")


class TestFoldRegistry:
    """Tests for FoldRegistry."""

    def test_duplicate_registration_rejected(self):
        folds = FoldRegistry()
        folds.assign(Window, Schedule, "window")

        with pytest.raises(ValueError):
            folds.assign(Window, Schedule, "window")

    def test_registry_is_enumerable(self):
        folds = FoldRegistry()
        folds.assign(Window, Schedule, "window")

        assert list(folds) == [(Window, Schedule)]
        assert (Window, Schedule) in folds
        assert len(folds) == 1

    def test_fold_applies_merge(self):
        folds = FoldRegistry()
        folds.assign(Window, Schedule, "window")
        parent = Schedule()
        child = Window(open=True)
        folds.fold(parent, child)

        assert parent.window.open is True

    def test_fold_unregistered_pair(self):
        with pytest.raises(UnregisteredFoldError):
            FoldRegistry().fold(Schedule(), Window())

    def test_custom_merge(self):
        folds = FoldRegistry()
        folds.register(Window, Schedule, lambda parent, child: setattr(parent, "owner", "merged"))
        parent = Schedule()
        folds.fold(parent, Window())

        assert parent.owner == "merged"

    def test_global_registry_holds_resource_folds(self):
        """Test that importing the resource modules registers their folds."""
        import squarekit.client  # noqa: F401

        assert (OrderServiceCharge, Order) in registry
        assert (OrderLineItem, Order) in registry
