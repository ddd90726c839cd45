# catalog/services/registry.py
import logging
from typing import Dict, Iterable, List, Type

from sqlalchemy.orm import Session

from catalog.errors import UnknownEntityKind
from catalog.models import SelectOptions
from catalog.models.common import View
from catalog.results import Result
from .base import CandidateInput, EntityService
from .reference import NationalityService, GenreService, FacultyService
from .author_service import AuthorService
from .publisher_service import PublisherService
from .course_service import CourseService
from .book_service import BookService
from .student_service import StudentService
from .reservation_service import ReservationService
from .location_service import LocationService
from .options import OptionAggregator

logger = logging.getLogger(__name__)

SERVICES: Dict[str, Type[EntityService]] = {
    service.kind: service
    for service in (
        NationalityService,
        GenreService,
        FacultyService,
        CourseService,
        PublisherService,
        AuthorService,
        BookService,
        LocationService,
        StudentService,
        ReservationService,
    )
}


class CatalogService:
    """Entry point used by the API and the CLI.

    Dispatches by entity kind ("authors", "books", ...) to the matching
    service, all sharing one session for the unit of work.
    """

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def kinds() -> List[str]:
        return list(SERVICES)

    def service_for(self, kind: str) -> EntityService:
        try:
            service_class = SERVICES[kind]
        except KeyError:
            raise UnknownEntityKind(kind) from None
        return service_class(self.session)

    def list_entities(self, kind: str) -> List[View]:
        return self.service_for(kind).get_list()

    def get_entity(self, kind: str, entity_id: int) -> Result:
        return self.service_for(kind).get_info(entity_id)

    def create_entity(self, kind: str, candidate: CandidateInput) -> Result:
        return self.service_for(kind).create(candidate)

    def update_entity(self, kind: str, entity_id: int, candidate: CandidateInput) -> Result:
        return self.service_for(kind).update(entity_id, candidate)

    def get_select_options(self, kinds: Iterable[str]) -> SelectOptions:
        kinds = list(kinds)
        producers = {kind: self.service_for(kind).get_for_select for kind in kinds}
        return OptionAggregator(producers).aggregate(kinds)
