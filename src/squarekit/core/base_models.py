"""Base model shared by every Square request body and object."""

import uuid
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn, Self

from pydantic import BaseModel, ConfigDict

from squarekit.core.exceptions import BodyValidationError

if TYPE_CHECKING:
    from squarekit.core.setters import SetterSpec


def new_idempotency_key() -> str:
    return str(uuid.uuid4())


class SquareModel(BaseModel):
    """Pydantic model that can be assembled with a Builder.

    Subclasses declare their chainable setters in ``setters`` and override
    ``validate_body`` when they have required fields.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    setters: ClassVar[dict[str, "SetterSpec"]] = {}

    def validate_body(self) -> Self:
        """Return the body when it is complete, otherwise raise BodyValidationError.

        May fill derived fields such as idempotency keys, but only on success.
        """
        return self

    def reject(self, reason: str) -> NoReturn:
        raise BodyValidationError(reason, body_type=type(self).__name__)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with unset fields omitted."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
