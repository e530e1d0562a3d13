"""Action Result — tagged success/failure envelope returned across the action boundary.

Invariants:
    - Exactly two variants: Success(data) and Failure(error, code, field)
    - `success` is a Literal tag, never inferred from truthiness of data
    - to_dict() is the only wire shape; error responses use the same keys

Design Decisions:
    - Frozen dataclasses over a dict with optional keys: callers branch on
      isinstance / `success` and the type checker knows which fields exist
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from sports_events.core.errors import SportsEventsError, ValidationError

T = TypeVar("T")

GENERIC_FAILURE_MESSAGE = "An unexpected error occurred"
GENERIC_FAILURE_CODE = "INTERNAL_ERROR"


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    success: Literal[True] = True

    def to_dict(self) -> dict:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class Failure:
    error: str
    code: str | None = None
    field: str | None = None
    success: Literal[False] = False

    @classmethod
    def from_error(cls, exc: SportsEventsError) -> "Failure":
        field = exc.field if isinstance(exc, ValidationError) else None
        return cls(error=exc.message, code=exc.code, field=field)

    @classmethod
    def unexpected(cls) -> "Failure":
        return cls(error=GENERIC_FAILURE_MESSAGE, code=GENERIC_FAILURE_CODE)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"success": False, "error": self.error, "code": self.code}
        if self.field is not None:
            out["field"] = self.field
        return out


ActionResult = Success[T] | Failure
