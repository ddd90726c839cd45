# catalog/services/book_service.py
from typing import List, Optional

from catalog.models import BookCandidate
from catalog.results import FieldError
from catalog.sa.models import Book, Author, Publisher, Genre, Course
from catalog.sa.repositories import BookRepository
from catalog.validation import Reference
from .base import EntityService


class BookService(EntityService):
    kind = 'books'
    label = 'Book'
    model = Book
    candidate_schema = BookCandidate
    repository_class = BookRepository
    references = (
        Reference('author_id', Author, 'Author'),
        Reference('publisher_id', Publisher, 'Publisher'),
        Reference('genre_id', Genre, 'Genre'),
        Reference('course_id', Course, 'Course'),
    )

    def check_domain(self, candidate: BookCandidate, current: Optional[Book]) -> List[FieldError]:
        # Copies already out on loan cannot disappear from the total
        if current is not None and candidate.total_copies < current.loaned_copies:
            return [FieldError(
                'total_copies',
                'invalid',
                f"Total copies cannot be lower than the {current.loaned_copies} copies on loan.",
            )]
        return []

    def apply(self, entity: Book, candidate: BookCandidate) -> None:
        super().apply(entity, candidate)
        if entity.loaned_copies is None:
            entity.loaned_copies = 0
