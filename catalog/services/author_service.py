# catalog/services/author_service.py
from catalog.models import AuthorCandidate
from catalog.sa.models import Author, Nationality, Genre
from catalog.sa.repositories import AuthorRepository
from catalog.validation import Reference, Unique
from .base import EntityService


class AuthorService(EntityService):
    kind = 'authors'
    label = 'Author'
    model = Author
    candidate_schema = AuthorCandidate
    repository_class = AuthorRepository
    references = (
        Reference('nationality_id', Nationality, 'Nationality'),
        Reference('genre_id', Genre, 'Genre'),
    )
    unique_fields = (Unique('name', 'Author'),)
