# catalog/sa/repositories/reservation.py
from typing import List, Optional
from sqlalchemy import select

from catalog.errors import DataIntegrityError
from catalog.models import ReservationListView, ReservationInfoView, SelectOption
from catalog.sa.models import Reservation, Book, Student, Status
from .base import BaseRepository
from .student import student_full_name


class ReservationRepository(BaseRepository):
    model = Reservation
    required_joins = {'book_title': 'book', 'student_name': 'student'}

    def find_for_select(self) -> List[SelectOption]:
        """Active reservations labelled with the reserved book's title"""
        stmt = (
            self._joined(Reservation.id, Book.title.label('name'))
            .where(Reservation.status == Status.ACTIVE)
            .order_by(Book.title.asc(), Reservation.id.asc())
        )
        rows = self.session.execute(stmt).all()
        for row in rows:
            if row.name is None:
                raise DataIntegrityError(self.model.__name__, row.id, 'book')
        return [SelectOption(id=row.id, name=row.name) for row in rows]

    def _joined(self, *columns):
        return (
            select(*columns)
            .select_from(Reservation)
            .outerjoin(Book, Book.id == Reservation.book_id)
            .outerjoin(Student, Student.id == Reservation.student_id)
        )

    def find_list(self) -> List[ReservationListView]:
        stmt = self._joined(
            Reservation.id,
            Reservation.book_id,
            Book.title.label('book_title'),
            Reservation.student_id,
            student_full_name().label('student_name'),
            Reservation.reservation_date,
            Reservation.status,
        ).order_by(Reservation.id.desc())
        return [self._to_view(ReservationListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, reservation_id: int) -> Optional[ReservationInfoView]:
        stmt = self._joined(
            Reservation.id,
            Reservation.book_id,
            Book.title.label('book_title'),
            Reservation.student_id,
            student_full_name().label('student_name'),
            Student.dni.label('student_dni'),
            Reservation.reservation_date,
            Reservation.status,
        ).where(Reservation.id == reservation_id)
        row = self.session.execute(stmt).first()
        return self._to_view(ReservationInfoView, row) if row else None
