# catalog/sa/repositories/__init__.py
from .base import BaseRepository
from .reference import NationalityRepository, GenreRepository, FacultyRepository
from .author import AuthorRepository
from .publisher import PublisherRepository
from .course import CourseRepository
from .book import BookRepository
from .student import StudentRepository
from .reservation import ReservationRepository
from .location import LocationRepository

__all__ = [
    'BaseRepository',
    'NationalityRepository',
    'GenreRepository',
    'FacultyRepository',
    'AuthorRepository',
    'PublisherRepository',
    'CourseRepository',
    'BookRepository',
    'StudentRepository',
    'ReservationRepository',
    'LocationRepository'
]
