# catalog/sa/repositories/reference.py
from typing import List, Optional
from sqlalchemy import select

from catalog.models import NamedView
from catalog.sa.models import Nationality, Genre, Faculty
from .base import BaseRepository


class NamedRepository(BaseRepository):
    """Repository for lookup tables that only carry a unique name"""

    def find_list(self) -> List[NamedView]:
        stmt = select(self.model.id, self.model.name).order_by(self.model.id.desc())
        return [self._to_view(NamedView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, entity_id: int) -> Optional[NamedView]:
        stmt = select(self.model.id, self.model.name).where(self.model.id == entity_id)
        row = self.session.execute(stmt).first()
        return self._to_view(NamedView, row) if row else None


class NationalityRepository(NamedRepository):
    model = Nationality


class GenreRepository(NamedRepository):
    model = Genre


class FacultyRepository(NamedRepository):
    model = Faculty
