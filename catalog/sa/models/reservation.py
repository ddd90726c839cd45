# catalog/sa/models/reservation.py
from datetime import date
from sqlalchemy import Integer, Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, Status, status_column

class Reservation(Base, TimestampMixin):
    __tablename__ = 'reservation'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    student_id: Mapped[int] = mapped_column(ForeignKey('student.id'), nullable=False)
    reservation_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[Status] = status_column()

    __table_args__ = (
        Index('idx_reservation_book_id', 'book_id'),
        Index('idx_reservation_student_id', 'student_id'),
    )
