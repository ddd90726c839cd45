# catalog/services/course_service.py
from catalog.models import CourseCandidate
from catalog.sa.models import Course
from catalog.sa.repositories import CourseRepository
from catalog.validation import Unique
from .base import EntityService


class CourseService(EntityService):
    kind = 'courses'
    label = 'Course'
    model = Course
    candidate_schema = CourseCandidate
    repository_class = CourseRepository
    unique_fields = (Unique('name', 'Course'),)
