# catalog/sa/models/location.py
from sqlalchemy import Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Location(Base, TimestampMixin):
    __tablename__ = 'location'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Shelves live and die with their location
    shelves: Mapped[list["Shelf"]] = relationship(
        'Shelf',
        back_populates='location',
        cascade='all, delete-orphan',
        order_by='Shelf.position',
    )

class Shelf(Base, TimestampMixin):
    __tablename__ = 'shelf'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    location_id: Mapped[int] = mapped_column(ForeignKey('location.id'), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    floor: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    location: Mapped[Location] = relationship('Location', back_populates='shelves')

    __table_args__ = (
        UniqueConstraint('location_id', 'position', name='uq_shelf_location_position'),
    )
