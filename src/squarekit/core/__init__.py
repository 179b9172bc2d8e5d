"""Builder framework: validated bodies, chainable setters and sub-builder folds."""

from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.builder import Builder, BuilderState
from squarekit.core.exceptions import (
    BodyValidationError,
    BuilderStateError,
    BuildError,
    SquareAPIError,
    SquareKitError,
    SquareTransportError,
    UnregisteredFoldError,
)
from squarekit.core.folds import FoldRegistry, registry

__all__ = [
    "BodyValidationError",
    "Builder",
    "BuilderState",
    "BuilderStateError",
    "BuildError",
    "FoldRegistry",
    "SquareAPIError",
    "SquareKitError",
    "SquareModel",
    "SquareTransportError",
    "UnregisteredFoldError",
    "new_idempotency_key",
    "registry",
]
