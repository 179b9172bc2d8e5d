"""Generic chainable builder for Square request bodies.

Usage::

    body = (
        Builder.from_body(CreateOrderBody())
        .location_id("L1")
        .sub_builder_from(OrderServiceCharge())
        .name("delivery")
        .amount_money(Money(amount=300, currency=Currency.USD))
        .total_phase()
        .into_parent_builder()
        .build()
    )

Each builder has a single live handle. A builder that was built or folded is
consumed, and a parent is suspended while one of its children is open; using
either raises BuilderStateError.
"""

import logging
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from squarekit.core.base_models import SquareModel
from squarekit.core.exceptions import (
    BodyValidationError,
    BuilderStateError,
    BuildError,
    UnregisteredFoldError,
)
from squarekit.core.folds import FoldRegistry, registry

logger = logging.getLogger(__name__)

BodyT = TypeVar("BodyT", bound=SquareModel)


class BuilderState(str, Enum):
    OPEN = "open"
    SUSPENDED = "suspended"
    CONSUMED = "consumed"


class Builder(Generic[BodyT]):
    """Wraps a work-in-progress body and, for sub-builders, its parent builder."""

    def __init__(
        self,
        body: BodyT,
        parent: "Builder[Any] | None" = None,
        folds: FoldRegistry | None = None,
    ):
        self._body = body.model_copy(deep=True)
        self._parent = parent
        self._folds = folds if folds is not None else registry
        self._state = BuilderState.OPEN

    @classmethod
    def from_body(cls, body: BodyT, folds: FoldRegistry | None = None) -> "Builder[BodyT]":
        """Start a builder on a copy of ``body``; later changes to ``body`` are not seen."""
        return cls(body, folds=folds)

    @property
    def builder_state(self) -> BuilderState:
        return self._state

    @property
    def parent(self) -> "Builder[Any] | None":
        return self._parent

    def __repr__(self) -> str:
        return f"Builder({type(self._body).__name__}, state={self._state.value})"

    def __getattr__(self, name: str) -> Callable[..., "Builder[BodyT]"]:
        if name.startswith("_"):
            raise AttributeError(name)
        spec = type(self._body).setters.get(name)
        if spec is None:
            raise AttributeError(f"{type(self._body).__name__} has no setter {name!r}")

        def setter(*args: Any, **kwargs: Any) -> "Builder[BodyT]":
            self._ensure_open()
            spec.apply(self._body, *args, **kwargs)
            return self

        setter.__name__ = name
        return setter

    def build(self) -> BodyT:
        """Validate and return the body, raising BuildError if it is incomplete.

        Consumes this builder and any parent chain it belongs to.
        """
        self._ensure_open()
        self._consume_chain()
        return self._validated()

    def sub_builder_from(self, body: SquareModel) -> "Builder[Any]":
        """Open a child builder whose result folds back into this builder's body."""
        self._ensure_open()
        if self._folds.lookup(type(body), type(self._body)) is None:
            raise UnregisteredFoldError(type(body), type(self._body))
        self._state = BuilderState.SUSPENDED
        return Builder(body, parent=self, folds=self._folds)

    def into_parent_builder(self) -> "Builder[Any]":
        """Validate this child, fold it into the parent body and return the parent.

        On validation failure raises BuildError and the parent chain is dropped.
        The parent chain is also dropped if the merge itself fails.
        """
        self._ensure_open()
        parent = self._parent
        if parent is None:
            raise BuilderStateError("Builder has no parent to fold into")
        self._state = BuilderState.CONSUMED
        try:
            body = self._validated()
        except BuildError:
            parent._consume_chain()
            raise
        try:
            self._folds.fold(parent._body, body)
        except Exception:
            parent._consume_chain()
            raise
        parent._state = BuilderState.OPEN
        return parent

    def _validated(self) -> BodyT:
        try:
            return self._body.validate_body()
        except BodyValidationError as exc:
            logger.debug("%s failed validation: %s", type(self._body).__name__, exc.message)
            raise BuildError(type(self._body).__name__) from exc

    def _consume_chain(self) -> None:
        builder: Builder[Any] | None = self
        while builder is not None:
            builder._state = BuilderState.CONSUMED
            builder = builder._parent

    def _ensure_open(self) -> None:
        if self._state is BuilderState.CONSUMED:
            raise BuilderStateError("Builder was already consumed", state=self._state.value)
        if self._state is BuilderState.SUSPENDED:
            raise BuilderStateError(
                "Builder is suspended until its sub-builder is folded back",
                state=self._state.value,
            )
