# catalog/services/base.py
import logging
from typing import Any, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from catalog.models.common import Candidate, SelectOption, View
from catalog.results import FieldError, NotFound, Result, Success, ValidationFailure
from catalog.sa.repositories import BaseRepository
from catalog.validation import Reference, Unique, check_reference, check_unique

logger = logging.getLogger(__name__)

CandidateInput = Union[Candidate, Mapping[str, Any]]


class EntityService:
    """Reads and writes one entity kind.

    Reads go straight to the repository projections. Writes run every check
    first, and only touch the session once the candidate is known to be
    valid, so a rejected call leaves the store unchanged.

    Subclasses declare ``references`` and ``unique_fields`` and may extend
    ``check_domain`` and ``apply``.
    """

    kind: str
    label: str
    model: Type[Any]
    candidate_schema: Type[Candidate]
    repository_class: Type[BaseRepository]
    references: Tuple[Reference, ...] = ()
    unique_fields: Tuple[Unique, ...] = ()

    def __init__(self, session: Session):
        self.session = session
        self.repository = self.repository_class(session)

    # Reads

    def get_list(self) -> List[View]:
        return self.repository.find_list()

    def get_info(self, entity_id: int) -> Result:
        info = self.repository.find_info_by_id(entity_id)
        if info is None:
            return NotFound(self.kind, entity_id, f"{self.label} not found.")
        return Success(info)

    def get_for_select(self) -> List[SelectOption]:
        return self.repository.find_for_select()

    # Writes

    def create(self, candidate: CandidateInput) -> Result:
        parsed = self.parse(candidate)
        if isinstance(parsed, ValidationFailure):
            return parsed

        errors = self.validate(parsed)
        if errors:
            return self._reject("create", errors)

        entity = self.model()
        self.apply(entity, parsed)
        self.session.add(entity)
        return self._commit(entity, "Created")

    def update(self, entity_id: int, candidate: CandidateInput) -> Result:
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            logger.info(f"Update of missing {self.label} {entity_id}")
            return NotFound(self.kind, entity_id, f"{self.label} not found.")

        parsed = self.parse(candidate)
        if isinstance(parsed, ValidationFailure):
            return parsed

        errors = self.validate(parsed, current=entity)
        if errors:
            return self._reject("update", errors)

        self.apply(entity, parsed)
        return self._commit(entity, "Updated")

    # Hooks

    def parse(self, candidate: CandidateInput) -> Union[Candidate, ValidationFailure]:
        """Coerce raw input into the candidate schema"""
        if isinstance(candidate, self.candidate_schema):
            return candidate
        if isinstance(candidate, BaseModel):
            candidate = candidate.model_dump()
        try:
            return self.candidate_schema.model_validate(candidate)
        except ValidationError as e:
            errors = tuple(
                FieldError(".".join(str(part) for part in err["loc"]) or "body", "invalid", err["msg"])
                for err in e.errors()
            )
            logger.warning(f"Malformed {self.label} input: {errors}")
            return ValidationFailure(errors)

    def validate(self, candidate: Candidate, current: Optional[Any] = None) -> List[FieldError]:
        """Run reference, uniqueness and domain checks, collecting every failure"""
        errors: List[FieldError] = []
        for ref in self.references:
            error = check_reference(
                self.session,
                ref.model,
                getattr(candidate, ref.field),
                ref.field,
                ref.label,
                require_active=ref.require_active,
                current_id=getattr(current, ref.field) if current is not None else None,
            )
            if error:
                errors.append(error)

        for unique in self.unique_fields:
            error = check_unique(
                self.session,
                self.model,
                unique.field,
                getattr(candidate, unique.field),
                unique.label,
                exclude_id=current.id if current is not None else None,
            )
            if error:
                errors.append(error)

        errors.extend(self.check_domain(candidate, current))
        return errors

    def check_domain(self, candidate: Candidate, current: Optional[Any]) -> List[FieldError]:
        return []

    def apply(self, entity: Any, candidate: Candidate) -> None:
        """Copy every candidate field onto the entity (whole-record replace)"""
        for name, value in candidate.model_dump().items():
            setattr(entity, name, value)

    # Helpers

    def _reject(self, action: str, errors: List[FieldError]) -> ValidationFailure:
        logger.warning(f"Rejected {self.label} {action}: {[f'{e.field}:{e.code}' for e in errors]}")
        return ValidationFailure(tuple(errors))

    def _commit(self, entity: Any, verb: str) -> Result:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"{verb} {self.label} hit a constraint: {e.orig}")
            return ValidationFailure((
                FieldError("record", "conflict", f"{self.label} conflicts with existing data."),
            ))
        except DataError as e:
            # Values the store refuses to hold, e.g. too long for the column
            self.session.rollback()
            logger.warning(f"{verb} {self.label} rejected by the database: {e.orig}")
            return ValidationFailure((
                FieldError("record", "invalid", f"{self.label} has a value the database cannot store."),
            ))

        logger.info(f"{verb} {self.label} {entity.id}")
        return Success(self.repository.find_info_by_id(entity.id))
