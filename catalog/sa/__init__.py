# catalog/sa/__init__.py
from .database import Database
from .models import (
    Base, Status, Nationality, Genre, Faculty, Course, Publisher,
    Author, Book, Location, Shelf, Student, Reservation
)

__all__ = [
    'Database',
    'Base',
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
