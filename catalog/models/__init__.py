# catalog/models/__init__.py
from .common import SelectOption, SelectOptions, format_id
from .reference import NameCandidate, FacultyCandidate, NamedView
from .author import AuthorCandidate, AuthorListView, AuthorInfoView
from .publisher import PublisherCandidate, PublisherListView, PublisherInfoView
from .course import CourseCandidate, CourseListView, CourseInfoView
from .book import BookCandidate, BookListView, BookInfoView
from .student import StudentCandidate, StudentListView, StudentInfoView
from .reservation import ReservationCandidate, ReservationListView, ReservationInfoView
from .location import ShelfCandidate, LocationCandidate, ShelfView, LocationListView, LocationInfoView

__all__ = [
    'SelectOption',
    'SelectOptions',
    'format_id',
    'NameCandidate',
    'FacultyCandidate',
    'NamedView',
    'AuthorCandidate',
    'AuthorListView',
    'AuthorInfoView',
    'PublisherCandidate',
    'PublisherListView',
    'PublisherInfoView',
    'CourseCandidate',
    'CourseListView',
    'CourseInfoView',
    'BookCandidate',
    'BookListView',
    'BookInfoView',
    'StudentCandidate',
    'StudentListView',
    'StudentInfoView',
    'ReservationCandidate',
    'ReservationListView',
    'ReservationInfoView',
    'ShelfCandidate',
    'LocationCandidate',
    'ShelfView',
    'LocationListView',
    'LocationInfoView'
]
