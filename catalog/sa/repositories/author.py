# catalog/sa/repositories/author.py
from typing import List, Optional
from sqlalchemy import select

from catalog.models import AuthorListView, AuthorInfoView
from catalog.sa.models import Author, Nationality, Genre
from .base import BaseRepository


class AuthorRepository(BaseRepository):
    model = Author
    required_joins = {'nationality_name': 'nationality', 'genre_name': 'genre'}

    def _joined(self, *columns):
        return (
            select(*columns)
            .select_from(Author)
            .outerjoin(Nationality, Nationality.id == Author.nationality_id)
            .outerjoin(Genre, Genre.id == Author.genre_id)
        )

    def find_list(self) -> List[AuthorListView]:
        """All authors, newest first, with nationality and genre names"""
        stmt = self._joined(
            Author.id,
            Author.name,
            Nationality.name.label('nationality_name'),
            Genre.name.label('genre_name'),
            Author.birth_date,
            Author.status,
            Author.photo_url,
        ).order_by(Author.id.desc())
        return [self._to_view(AuthorListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, author_id: int) -> Optional[AuthorInfoView]:
        """One author with every reference resolved to id and name"""
        stmt = self._joined(
            Author.id,
            Author.name,
            Author.nationality_id,
            Nationality.name.label('nationality_name'),
            Author.genre_id,
            Genre.name.label('genre_name'),
            Author.birth_date,
            Author.biography,
            Author.status,
            Author.photo_url,
        ).where(Author.id == author_id)
        row = self.session.execute(stmt).first()
        return self._to_view(AuthorInfoView, row) if row else None
