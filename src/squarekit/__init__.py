"""Async client for the Square payments REST API with chainable request builders."""

from squarekit.client import SquareClient
from squarekit.config import Settings, configure_logging, settings
from squarekit.core import (
    BodyValidationError,
    Builder,
    BuilderState,
    BuilderStateError,
    BuildError,
    FoldRegistry,
    SquareAPIError,
    SquareKitError,
    SquareModel,
    SquareTransportError,
    UnregisteredFoldError,
    registry,
)
from squarekit.endpoints import Environment, SquareAPI, Verb
from squarekit.response import ResponseError, SquareResponse

__version__ = "0.1.0"

__all__ = [
    "BodyValidationError",
    "Builder",
    "BuilderState",
    "BuilderStateError",
    "BuildError",
    "Environment",
    "FoldRegistry",
    "ResponseError",
    "Settings",
    "SquareAPI",
    "SquareAPIError",
    "SquareClient",
    "SquareKitError",
    "SquareModel",
    "SquareResponse",
    "SquareTransportError",
    "UnregisteredFoldError",
    "Verb",
    "configure_logging",
    "registry",
    "settings",
]
