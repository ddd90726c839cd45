# catalog/results.py
"""Outcomes returned by the catalog services.

Every read-by-id and every mutation returns one of ``Success``, ``NotFound``
or ``ValidationFailure``. Adapters map these to transport status codes.
Data-integrity faults are not represented here: they propagate as
``DataIntegrityError``.
"""
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class NotFound:
    kind: str
    entity_id: int
    message: str = "Not found."


@dataclass(frozen=True)
class ValidationFailure:
    errors: Tuple[FieldError, ...]

    @property
    def message(self) -> str:
        return " ".join(error.message for error in self.errors)

    def error_for(self, field_name: str) -> Optional[FieldError]:
        return next((e for e in self.errors if e.field == field_name), None)


Result = Union[Success[T], NotFound, ValidationFailure]
