# catalog/models/location.py
from typing import List, Optional
from pydantic import Field, computed_field

from .common import LOCATION_PREFIX, Candidate, MediumName, OptionalShortText, OptionalText, ShortText, View, format_id


class ShelfCandidate(Candidate):
    code: ShortText
    floor: OptionalShortText = None
    description: OptionalText = None


class LocationCandidate(Candidate):
    name: MediumName
    description: OptionalText = None
    # Order matters: index i becomes shelf position i
    shelves: List[ShelfCandidate] = Field(default_factory=list)


class ShelfView(View):
    id: int
    position: int
    code: str
    floor: Optional[str] = None
    description: Optional[str] = None


class LocationListView(View):
    id: int
    name: str
    description: Optional[str] = None
    shelf_count: int

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(LOCATION_PREFIX, self.id)


class LocationInfoView(View):
    id: int
    name: str
    description: Optional[str] = None
    shelves: List[ShelfView]

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(LOCATION_PREFIX, self.id)
