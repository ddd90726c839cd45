# catalog/models/book.py
from datetime import date
from typing import Optional
from pydantic import Field, computed_field

from .common import (
    AUTHOR_PREFIX, BOOK_PREFIX, PUBLISHER_PREFIX, COURSE_PREFIX,
    Candidate, Name, Status, View, format_id
)


class BookCandidate(Candidate):
    title: Name
    total_copies: int = Field(ge=1, le=1000)
    author_id: int
    publisher_id: int
    genre_id: int
    course_id: Optional[int] = None
    release_date: Optional[date] = None
    status: Status


class BookListView(View):
    id: int
    title: str
    total_copies: int
    loaned_copies: int
    author_id: int
    author_name: str
    publisher_id: int
    publisher_name: str
    genre_name: str
    status: Status

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(BOOK_PREFIX, self.id)

    @computed_field
    @property
    def available_copies(self) -> int:
        return self.total_copies - self.loaned_copies

    @computed_field
    @property
    def formatted_author_id(self) -> str:
        return format_id(AUTHOR_PREFIX, self.author_id)

    @computed_field
    @property
    def formatted_publisher_id(self) -> str:
        return format_id(PUBLISHER_PREFIX, self.publisher_id)


class BookInfoView(BookListView):
    genre_id: int
    course_id: Optional[int] = None
    course_name: Optional[str] = None
    release_date: Optional[date] = None

    @computed_field
    @property
    def formatted_course_id(self) -> Optional[str]:
        return format_id(COURSE_PREFIX, self.course_id)
