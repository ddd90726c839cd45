# catalog/sa/repositories/location.py
from typing import List, Optional
from sqlalchemy import select, func

from catalog.models import LocationListView, LocationInfoView, ShelfView
from catalog.sa.models import Location, Shelf
from .base import BaseRepository


class LocationRepository(BaseRepository):
    model = Location

    def get_shelves(self, location_id: int) -> List[Shelf]:
        """Shelves of a location in position order"""
        return list(
            self.session.execute(
                select(Shelf).where(Shelf.location_id == location_id).order_by(Shelf.position)
            ).scalars()
        )

    def find_list(self) -> List[LocationListView]:
        stmt = (
            select(
                Location.id,
                Location.name,
                Location.description,
                func.count(Shelf.id).label('shelf_count'),
            )
            .select_from(Location)
            .outerjoin(Shelf, Shelf.location_id == Location.id)
            .group_by(Location.id, Location.name, Location.description)
            .order_by(Location.id.desc())
        )
        return [self._to_view(LocationListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, location_id: int) -> Optional[LocationInfoView]:
        """One location with its shelves in position order"""
        stmt = select(Location.id, Location.name, Location.description).where(Location.id == location_id)
        row = self.session.execute(stmt).first()
        if row is None:
            return None
        shelves = [ShelfView.model_validate(shelf) for shelf in self.get_shelves(location_id)]
        return self._to_view(LocationInfoView, row, shelves=shelves)
