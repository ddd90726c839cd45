# catalog/sa/models/publisher.py
from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, Status, status_column

class Publisher(Base, TimestampMixin):
    __tablename__ = 'publisher'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    nationality_id: Mapped[int] = mapped_column(ForeignKey('nationality.id'), nullable=False)
    genre_id: Mapped[int] = mapped_column(ForeignKey('genre.id'), nullable=False)
    foundation_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[Status] = status_column()
    photo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    __table_args__ = (
        Index('idx_publisher_nationality_id', 'nationality_id'),
        Index('idx_publisher_genre_id', 'genre_id'),
    )
