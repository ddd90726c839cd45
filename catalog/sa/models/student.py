# catalog/sa/models/student.py
from datetime import date
from sqlalchemy import Integer, String, Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, Status, status_column

class Student(Base, TimestampMixin):
    __tablename__ = 'student'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    dni: Mapped[str] = mapped_column(String(8), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    faculty_id: Mapped[int] = mapped_column(ForeignKey('faculty.id'), nullable=False)
    status: Mapped[Status] = status_column()

    __table_args__ = (
        Index('idx_student_faculty_id', 'faculty_id'),
    )
