# catalog/models/student.py
from datetime import date
from typing import Annotated, Optional
from pydantic import StringConstraints, computed_field

from .common import STUDENT_PREFIX, Candidate, OptionalCode, OptionalString, ShortName, Status, View, format_id

Dni = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^\d{8}$")]
Email = Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")]


class StudentCandidate(Candidate):
    dni: Dni
    first_name: ShortName
    last_name: ShortName
    email: Email
    phone: OptionalCode = None
    address: OptionalString = None
    birth_date: Optional[date] = None
    gender: OptionalCode = None
    faculty_id: int
    status: Status


class StudentListView(View):
    id: int
    dni: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    email: str
    faculty_name: str
    status: Status

    @computed_field
    @property
    def formatted_id(self) -> str:
        return format_id(STUDENT_PREFIX, self.id)


class StudentInfoView(StudentListView):
    address: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    faculty_id: int
