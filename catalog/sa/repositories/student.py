# catalog/sa/repositories/student.py
from typing import List, Optional
from sqlalchemy import select

from catalog.models import StudentListView, StudentInfoView
from catalog.sa.models import Student, Faculty
from .base import BaseRepository


def student_full_name():
    return Student.first_name + ' ' + Student.last_name


class StudentRepository(BaseRepository):
    model = Student
    required_joins = {'faculty_name': 'faculty'}

    def select_label(self):
        return student_full_name()

    def _joined(self, *columns):
        return (
            select(*columns)
            .select_from(Student)
            .outerjoin(Faculty, Faculty.id == Student.faculty_id)
        )

    def find_list(self) -> List[StudentListView]:
        stmt = self._joined(
            Student.id,
            Student.dni,
            Student.first_name,
            Student.last_name,
            Student.phone,
            Student.email,
            Faculty.name.label('faculty_name'),
            Student.status,
        ).order_by(Student.id.desc())
        return [self._to_view(StudentListView, row) for row in self.session.execute(stmt)]

    def find_info_by_id(self, student_id: int) -> Optional[StudentInfoView]:
        stmt = self._joined(
            Student.id,
            Student.dni,
            Student.first_name,
            Student.last_name,
            Student.phone,
            Student.email,
            Student.address,
            Student.birth_date,
            Student.gender,
            Student.faculty_id,
            Faculty.name.label('faculty_name'),
            Student.status,
        ).where(Student.id == student_id)
        row = self.session.execute(stmt).first()
        return self._to_view(StudentInfoView, row) if row else None
