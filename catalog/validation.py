# catalog/validation.py
"""Pre-persistence checks used by the catalog services.

Each check returns a ``FieldError`` describing the problem, or ``None``
when the value is acceptable. Nothing here writes to the session.
"""
from dataclasses import dataclass
from typing import Any, Optional, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.results import FieldError
from catalog.sa.models import Status


@dataclass(frozen=True)
class Reference:
    """A many-to-one link from a candidate field to another entity"""
    field: str
    model: Type[Any]
    label: str
    require_active: bool = True


@dataclass(frozen=True)
class Unique:
    """A column whose value may appear at most once"""
    field: str
    label: str


def check_reference(
    session: Session,
    model: Type[Any],
    ref_id: Optional[int],
    field: str,
    label: str,
    require_active: bool = True,
    current_id: Optional[int] = None,
) -> Optional[FieldError]:
    """Check that ``ref_id`` points at an existing (and usable) entity.

    Args:
        session: Session used for the lookup
        model: Model class the reference points at
        ref_id: Referenced identifier, None for an unset optional reference
        field: Candidate field name, reported back on failure
        label: Human name of the referenced entity, e.g. "Author"
        require_active: Reject references to inactive entities
        current_id: The value currently stored on the record being updated.
                    An inactive entity is still accepted when it is unchanged.

    Returns:
        FieldError if the reference is dangling or inactive, None otherwise
    """
    if ref_id is None:
        return None
    entity = session.get(model, ref_id)
    if entity is None:
        return FieldError(field, "not_found", f"{label} not found.")
    status = getattr(entity, "status", None)
    if require_active and status is not None and status != Status.ACTIVE and ref_id != current_id:
        return FieldError(field, "inactive", f"{label} is inactive.")
    return None


def check_unique(
    session: Session,
    model: Type[Any],
    field: str,
    value: Any,
    label: str,
    exclude_id: Optional[int] = None,
) -> Optional[FieldError]:
    """Check that no other row of ``model`` already holds ``value`` in ``field``"""
    stmt = select(model.id).where(getattr(model, field) == value)
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)
    if session.execute(stmt.limit(1)).first() is not None:
        return FieldError(field, "duplicate", f"{label} '{value}' already exists.")
    return None
