# catalog/sa/repositories/base.py
from typing import Any, Dict, List, Optional, Type
from sqlalchemy import select
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from catalog.errors import DataIntegrityError
from catalog.models import SelectOption
from catalog.models.common import View
from catalog.sa.models import Status


class BaseRepository:
    """Shared projection plumbing for the catalog repositories.

    Subclasses set ``model`` and implement ``find_list`` and
    ``find_info_by_id``. Joins to referenced tables are outer joins; a
    required reference that comes back empty is reported through
    ``DataIntegrityError`` instead of silently dropping the row.
    """

    model: Type[Any]
    # Row label -> reference name, for references that must always resolve
    required_joins: Dict[str, str] = {}
    # Row label -> foreign key label, for nullable references
    optional_joins: Dict[str, str] = {}

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, entity_id: int) -> Optional[Any]:
        """Get an entity by its ID"""
        return self.session.get(self.model, entity_id)

    def select_label(self):
        """Column used as the display name in select views"""
        return self.model.name

    def find_for_select(self) -> List[SelectOption]:
        """Get id/name pairs for choice lists, active entities only"""
        label = self.select_label().label('name')
        stmt = select(self.model.id, label)
        if hasattr(self.model, 'status'):
            stmt = stmt.where(self.model.status == Status.ACTIVE)
        stmt = stmt.order_by(label.asc(), self.model.id.asc())
        return [SelectOption(id=row.id, name=row.name) for row in self.session.execute(stmt)]

    def _to_view(self, view_class: Type[View], row: Row, **extra) -> View:
        data = dict(row._mapping)
        for label, reference in self.required_joins.items():
            if label in data and data[label] is None:
                raise DataIntegrityError(self.model.__name__, data['id'], reference)
        for label, foreign_key in self.optional_joins.items():
            if label in data and data[label] is None and data.get(foreign_key) is not None:
                raise DataIntegrityError(self.model.__name__, data['id'], foreign_key.removesuffix('_id'))
        data.update(extra)
        return view_class.model_validate(data)
