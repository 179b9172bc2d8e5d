"""Custom exceptions for the Square client."""

from typing import Any


class SquareKitError(Exception):
    """Base exception for squarekit errors."""

    pass


class BodyValidationError(SquareKitError):
    """Raised by a body's validation gate when a required field is missing.

    Only seen inside the builder; callers receive BuildError.
    """

    def __init__(self, message: str, body_type: str | None = None):
        self.message = message
        self.body_type = body_type
        super().__init__(self.message)


class BuildError(SquareKitError):
    """Raised when a body cannot be built.

    The message never depends on which field was missing. The underlying
    BodyValidationError is available as ``__cause__``.
    """

    def __init__(self, body_type: str | None = None):
        self.body_type = body_type
        self.message = "Could not build request body"
        if body_type:
            self.message = f"Could not build {body_type}"
        super().__init__(self.message)


class BuilderStateError(SquareKitError):
    """Raised when a builder is used after it was consumed or while suspended."""

    def __init__(self, message: str, state: str | None = None):
        self.message = message
        self.state = state
        super().__init__(self.message)


class UnregisteredFoldError(SquareKitError, TypeError):
    """Raised when no fold exists for a (child, parent) body pair."""

    def __init__(self, child_type: type, parent_type: type):
        self.child_type = child_type
        self.parent_type = parent_type
        self.message = (
            f"No fold registered for {child_type.__name__} into {parent_type.__name__}"
        )
        super().__init__(self.message)


class SquareAPIError(SquareKitError):
    """Raised when the Square API answers with errors."""

    def __init__(
        self,
        message: str,
        errors: list[Any] | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.errors = errors or []
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def codes(self) -> list[str]:
        return [error.code for error in self.errors]


class SquareTransportError(SquareKitError):
    """Raised when a request cannot reach Square or the reply is not JSON."""

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(self.message)
