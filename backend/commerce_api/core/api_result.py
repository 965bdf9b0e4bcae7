"""API Result — discriminated success/failure type for the client boundary.

Invariants:
    - Exactly one of ApiSuccess / ApiFailure; `ok` is the discriminator
    - ApiFailure.error is always a non-empty, user-displayable string
    - ApiFailure.status_code is None when no HTTP response was received

Design Decisions:
    - Frozen dataclasses over a dict with optional "data"/"error" keys: callers
      branch on one field and the type checker narrows the payload
"""

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    data: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class ApiFailure:
    error: str
    status_code: int | None = None
    fields: dict[str, str] = field(default_factory=dict)
    ok: Literal[False] = False

    @property
    def is_validation_error(self) -> bool:
        """Structural error: rejected before or by schema validation."""
        return self.status_code in (None, 422) and bool(self.fields)


ApiResult = Union[ApiSuccess[T], ApiFailure]
