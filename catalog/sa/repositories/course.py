# catalog/sa/repositories/course.py
from typing import List, Optional
from sqlalchemy import select

from catalog.models import CourseListView, CourseInfoView
from catalog.sa.models import Course
from .base import BaseRepository


class CourseRepository(BaseRepository):
    model = Course

    def find_list(self) -> List[CourseListView]:
        stmt = select(Course.id, Course.name, Course.level, Course.status).order_by(Course.id.desc())
        return [self._to_view(CourseListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, course_id: int) -> Optional[CourseInfoView]:
        stmt = select(
            Course.id, Course.name, Course.level, Course.description, Course.status
        ).where(Course.id == course_id)
        row = self.session.execute(stmt).first()
        return self._to_view(CourseInfoView, row) if row else None
