# catalog/services/student_service.py
from catalog.models import StudentCandidate
from catalog.sa.models import Student, Faculty
from catalog.sa.repositories import StudentRepository
from catalog.validation import Reference, Unique
from .base import EntityService


class StudentService(EntityService):
    kind = 'students'
    label = 'Student'
    model = Student
    candidate_schema = StudentCandidate
    repository_class = StudentRepository
    references = (Reference('faculty_id', Faculty, 'Faculty'),)
    unique_fields = (
        Unique('dni', 'DNI'),
        Unique('email', 'Email'),
    )
