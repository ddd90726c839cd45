# catalog/sa/repositories/publisher.py
from typing import List, Optional
from sqlalchemy import select

from catalog.models import PublisherListView, PublisherInfoView
from catalog.sa.models import Publisher, Nationality, Genre
from .base import BaseRepository


class PublisherRepository(BaseRepository):
    model = Publisher
    required_joins = {'nationality_name': 'nationality', 'genre_name': 'genre'}

    def _joined(self, *columns):
        return (
            select(*columns)
            .select_from(Publisher)
            .outerjoin(Nationality, Nationality.id == Publisher.nationality_id)
            .outerjoin(Genre, Genre.id == Publisher.genre_id)
        )

    def find_list(self) -> List[PublisherListView]:
        stmt = self._joined(
            Publisher.id,
            Publisher.name,
            Nationality.name.label('nationality_name'),
            Genre.name.label('genre_name'),
            Publisher.website,
            Publisher.status,
        ).order_by(Publisher.id.desc())
        return [self._to_view(PublisherListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, publisher_id: int) -> Optional[PublisherInfoView]:
        stmt = self._joined(
            Publisher.id,
            Publisher.name,
            Publisher.nationality_id,
            Nationality.name.label('nationality_name'),
            Publisher.genre_id,
            Genre.name.label('genre_name'),
            Publisher.foundation_year,
            Publisher.website,
            Publisher.address,
            Publisher.status,
            Publisher.photo_url,
        ).where(Publisher.id == publisher_id)
        row = self.session.execute(stmt).first()
        return self._to_view(PublisherInfoView, row) if row else None
