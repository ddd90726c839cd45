# catalog/models/author.py
from datetime import date
from typing import Optional
from pydantic import computed_field

from .common import AUTHOR_PREFIX, Candidate, Name, OptionalText, OptionalUrl, Status, View, format_id


class AuthorCandidate(Candidate):
    name: Name
    nationality_id: int
    genre_id: int
    birth_date: date
    biography: OptionalText = None
    status: Status
    photo_url: OptionalUrl = None


class AuthorListView(View):
    id: int
    name: str
    nationality_name: str
    genre_name: str
    birth_date: date
    status: Status
    photo_url: Optional[str] = None

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(AUTHOR_PREFIX, self.id)


class AuthorInfoView(View):
    id: int
    name: str
    nationality_id: int
    nationality_name: str
    genre_id: int
    genre_name: str
    birth_date: date
    biography: Optional[str] = None
    status: Status
    photo_url: Optional[str] = None

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(AUTHOR_PREFIX, self.id)
