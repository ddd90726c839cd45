# catalog/sa/repositories/book.py
from typing import List, Optional
from sqlalchemy import select

from catalog.models import BookListView, BookInfoView
from catalog.sa.models import Book, Author, Publisher, Genre, Course
from .base import BaseRepository


class BookRepository(BaseRepository):
    model = Book
    required_joins = {
        'author_name': 'author',
        'publisher_name': 'publisher',
        'genre_name': 'genre',
    }
    optional_joins = {'course_name': 'course_id'}

    def select_label(self):
        return Book.title

    def _joined(self, *columns):
        return (
            select(*columns)
            .select_from(Book)
            .outerjoin(Author, Author.id == Book.author_id)
            .outerjoin(Publisher, Publisher.id == Book.publisher_id)
            .outerjoin(Genre, Genre.id == Book.genre_id)
        )

    def find_list(self) -> List[BookListView]:
        """All books, newest first, with author, publisher and genre names"""
        stmt = self._joined(
            Book.id,
            Book.title,
            Book.total_copies,
            Book.loaned_copies,
            Book.author_id,
            Author.name.label('author_name'),
            Book.publisher_id,
            Publisher.name.label('publisher_name'),
            Genre.name.label('genre_name'),
            Book.status,
        ).order_by(Book.id.desc())
        return [self._to_view(BookListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, book_id: int) -> Optional[BookInfoView]:
        """One book with author, publisher, genre and course resolved"""
        stmt = (
            self._joined(
                Book.id,
                Book.title,
                Book.total_copies,
                Book.loaned_copies,
                Book.author_id,
                Author.name.label('author_name'),
                Book.publisher_id,
                Publisher.name.label('publisher_name'),
                Book.genre_id,
                Genre.name.label('genre_name'),
                Book.course_id,
                Course.name.label('course_name'),
                Book.release_date,
                Book.status,
            )
            .outerjoin(Course, Course.id == Book.course_id)
            .where(Book.id == book_id)
        )
        row = self.session.execute(stmt).first()
        return self._to_view(BookInfoView, row) if row else None
