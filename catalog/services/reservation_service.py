# catalog/services/reservation_service.py
from catalog.models import ReservationCandidate
from catalog.sa.models import Reservation, Book, Student
from catalog.sa.repositories import ReservationRepository
from catalog.validation import Reference
from .base import EntityService


class ReservationService(EntityService):
    kind = 'reservations'
    label = 'Reservation'
    model = Reservation
    candidate_schema = ReservationCandidate
    repository_class = ReservationRepository
    references = (
        Reference('book_id', Book, 'Book'),
        Reference('student_id', Student, 'Student'),
    )
