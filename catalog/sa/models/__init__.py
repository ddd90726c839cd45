# catalog/sa/models/__init__.py
from .base import Base, TimestampMixin, Status
from .nationality import Nationality
from .genre import Genre
from .faculty import Faculty
from .course import Course
from .publisher import Publisher
from .author import Author
from .book import Book
from .location import Location, Shelf
from .student import Student
from .reservation import Reservation

__all__ = [
    'Base',
    'TimestampMixin',
    'Status',
    'Nationality',
    'Genre',
    'Faculty',
    'Course',
    'Publisher',
    'Author',
    'Book',
    'Location',
    'Shelf',
    'Student',
    'Reservation'
]
