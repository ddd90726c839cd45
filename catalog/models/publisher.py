# catalog/models/publisher.py
from typing import Optional
from pydantic import Field, computed_field

from .common import PUBLISHER_PREFIX, Candidate, Name, OptionalString, OptionalUrl, Status, View, format_id


class PublisherCandidate(Candidate):
    name: Name
    nationality_id: int
    genre_id: int
    foundation_year: Optional[int] = Field(default=None, ge=1400, le=2100)
    website: OptionalString = None
    address: OptionalString = None
    status: Status
    photo_url: OptionalUrl = None


class PublisherListView(View):
    id: int
    name: str
    nationality_name: str
    genre_name: str
    website: Optional[str] = None
    status: Status

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(PUBLISHER_PREFIX, self.id)


class PublisherInfoView(View):
    id: int
    name: str
    nationality_id: int
    nationality_name: str
    genre_id: int
    genre_name: str
    foundation_year: Optional[int] = None
    website: Optional[str] = None
    address: Optional[str] = None
    status: Status
    photo_url: Optional[str] = None

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(PUBLISHER_PREFIX, self.id)
