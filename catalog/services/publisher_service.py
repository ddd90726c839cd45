# catalog/services/publisher_service.py
from catalog.models import PublisherCandidate
from catalog.sa.models import Publisher, Nationality, Genre
from catalog.sa.repositories import PublisherRepository
from catalog.validation import Reference, Unique
from .base import EntityService


class PublisherService(EntityService):
    kind = 'publishers'
    label = 'Publisher'
    model = Publisher
    candidate_schema = PublisherCandidate
    repository_class = PublisherRepository
    references = (
        Reference('nationality_id', Nationality, 'Nationality'),
        Reference('genre_id', Genre, 'Genre'),
    )
    unique_fields = (Unique('name', 'Publisher'),)
