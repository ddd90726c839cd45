# catalog/services/location_service.py
import logging
from typing import List, Optional

from catalog.models import LocationCandidate
from catalog.results import FieldError
from catalog.sa.models import Location, Shelf
from catalog.sa.repositories import LocationRepository
from catalog.validation import Unique
from .base import EntityService

logger = logging.getLogger(__name__)


class LocationService(EntityService):
    """Locations and the shelf sequence they own.

    The shelf list is always written as a whole: after create or update the
    stored shelves are exactly the candidate's shelves, in the same order.
    """

    kind = 'locations'
    label = 'Location'
    model = Location
    candidate_schema = LocationCandidate
    repository_class = LocationRepository
    unique_fields = (Unique('name', 'Location'),)

    def check_domain(self, candidate: LocationCandidate, current: Optional[Location]) -> List[FieldError]:
        errors = []
        seen = set()
        for index, shelf in enumerate(candidate.shelves):
            if shelf.code in seen:
                errors.append(FieldError(
                    f'shelves.{index}.code', 'duplicate', f"Shelf code '{shelf.code}' is repeated."
                ))
            seen.add(shelf.code)
        return errors

    def apply(self, entity: Location, candidate: LocationCandidate) -> None:
        entity.name = candidate.name
        entity.description = candidate.description
        self.replace_shelves(entity, candidate)

    def replace_shelves(self, entity: Location, candidate: LocationCandidate) -> None:
        """Upsert shelves by position and drop the ones past the new end"""
        existing = {shelf.position: shelf for shelf in entity.shelves}
        shelves = []
        for position, data in enumerate(candidate.shelves):
            shelf = existing.pop(position, None) or Shelf(position=position)
            shelf.code = data.code
            shelf.floor = data.floor
            shelf.description = data.description
            shelves.append(shelf)

        # Assigning the full list orphans the leftovers, which the cascade deletes
        entity.shelves = shelves
        if existing:
            logger.debug(f"Removing shelves at positions {sorted(existing)} from location {entity.id}")
