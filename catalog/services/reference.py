# catalog/services/reference.py
from catalog.models import NameCandidate, FacultyCandidate
from catalog.sa.models import Nationality, Genre, Faculty
from catalog.sa.repositories import NationalityRepository, GenreRepository, FacultyRepository
from catalog.validation import Unique
from .base import EntityService


class NationalityService(EntityService):
    kind = 'nationalities'
    label = 'Nationality'
    model = Nationality
    candidate_schema = NameCandidate
    repository_class = NationalityRepository
    unique_fields = (Unique('name', 'Nationality'),)


class GenreService(EntityService):
    kind = 'genres'
    label = 'Genre'
    model = Genre
    candidate_schema = NameCandidate
    repository_class = GenreRepository
    unique_fields = (Unique('name', 'Genre'),)


class FacultyService(EntityService):
    kind = 'faculties'
    label = 'Faculty'
    model = Faculty
    candidate_schema = FacultyCandidate
    repository_class = FacultyRepository
    unique_fields = (Unique('name', 'Faculty'),)
