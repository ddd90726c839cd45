# catalog/models/course.py
from typing import Optional
from pydantic import computed_field

from .common import COURSE_PREFIX, Candidate, MediumName, OptionalText, ShortText, Status, View, format_id


class CourseCandidate(Candidate):
    name: MediumName
    level: ShortText
    description: OptionalText = None
    status: Status


class CourseListView(View):
    id: int
    name: str
    level: str
    status: Status

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(COURSE_PREFIX, self.id)


class CourseInfoView(CourseListView):
    description: Optional[str] = None
