# catalog/sa/models/book.py
from datetime import date
from sqlalchemy import Integer, String, Date, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, Status, status_column

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    total_copies: Mapped[int] = mapped_column(Integer, nullable=False)
    # Maintained by the loans workflow, never written through the catalog
    loaned_copies: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), nullable=False)
    publisher_id: Mapped[int] = mapped_column(ForeignKey('publisher.id'), nullable=False)
    genre_id: Mapped[int] = mapped_column(ForeignKey('genre.id'), nullable=False)
    course_id: Mapped[int | None] = mapped_column(ForeignKey('course.id'), nullable=True)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[Status] = status_column()

    __table_args__ = (
        CheckConstraint('loaned_copies >= 0', name='ck_book_loaned_copies'),
        CheckConstraint('total_copies >= loaned_copies', name='ck_book_total_copies'),
        Index('idx_book_author_id', 'author_id'),
        Index('idx_book_publisher_id', 'publisher_id'),
        Index('idx_book_genre_id', 'genre_id'),
    )
