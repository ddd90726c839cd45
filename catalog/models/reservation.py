# catalog/models/reservation.py
from datetime import date
from pydantic import computed_field

from .common import BOOK_PREFIX, RESERVATION_PREFIX, STUDENT_PREFIX, Candidate, Status, View, format_id


class ReservationCandidate(Candidate):
    book_id: int
    student_id: int
    reservation_date: date
    status: Status


class ReservationListView(View):
    id: int
    book_id: int
    book_title: str
    student_id: int
    student_name: str
    reservation_date: date
    status: Status

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(RESERVATION_PREFIX, self.id)

    @computed_field
    @property
    def formatted_book_id(self) -> str:
        return format_id(BOOK_PREFIX, self.book_id)

    @computed_field
    @property
    def formatted_student_id(self) -> str:
        return format_id(STUDENT_PREFIX, self.student_id)


class ReservationInfoView(ReservationListView):
    student_dni: str
