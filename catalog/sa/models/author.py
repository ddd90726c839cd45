# catalog/sa/models/author.py
from datetime import date
from sqlalchemy import Integer, String, Text, Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, Status, status_column

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    nationality_id: Mapped[int] = mapped_column(ForeignKey('nationality.id'), nullable=False)
    genre_id: Mapped[int] = mapped_column(ForeignKey('genre.id'), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[Status] = status_column()
    photo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    __table_args__ = (
        Index('idx_author_nationality_id', 'nationality_id'),
        Index('idx_author_genre_id', 'genre_id'),
    )
