# tests/conftest.py
import sys
from datetime import date
from pathlib import Path

import pytest

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from catalog.sa.database import Database
from catalog.sa.models import Nationality, Genre, Faculty, Status
from catalog.results import Success
from catalog.services import CatalogService


@pytest.fixture
def database(tmp_path):
    """Fresh SQLite database file per test"""
    db = Database(f"sqlite:///{tmp_path / 'test_catalog.db'}")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db_session):
    return CatalogService(db_session)


@pytest.fixture
def reference_data(db_session):
    """Nationalities, genres and a faculty used by most tests"""
    peruvian = Nationality(name="Peruvian")
    colombian = Nationality(name="Colombian")
    novel = Genre(name="Novel")
    poetry = Genre(name="Poetry")
    engineering = Faculty(name="Engineering")
    db_session.add_all([peruvian, colombian, novel, poetry, engineering])
    db_session.commit()
    return {
        "peruvian": peruvian.id,
        "colombian": colombian.id,
        "novel": novel.id,
        "poetry": poetry.id,
        "engineering": engineering.id,
    }


def _created(result):
    assert isinstance(result, Success), result
    return result.payload


@pytest.fixture
def make_author(catalog, reference_data):
    """Factory creating authors through the catalog service"""
    def factory(name="Mario Vargas Llosa", status=Status.ACTIVE, **overrides):
        candidate = {
            "name": name,
            "nationality_id": reference_data["peruvian"],
            "genre_id": reference_data["novel"],
            "birth_date": date(1936, 3, 28),
            "biography": "Nobel laureate",
            "status": status,
        }
        candidate.update(overrides)
        return _created(catalog.create_entity("authors", candidate))
    return factory


@pytest.fixture
def make_publisher(catalog, reference_data):
    def factory(name="Alfaguara", status=Status.ACTIVE, **overrides):
        candidate = {
            "name": name,
            "nationality_id": reference_data["colombian"],
            "genre_id": reference_data["novel"],
            "foundation_year": 1964,
            "status": status,
        }
        candidate.update(overrides)
        return _created(catalog.create_entity("publishers", candidate))
    return factory


@pytest.fixture
def make_course(catalog):
    def factory(name="Literature I", status=Status.ACTIVE, **overrides):
        candidate = {"name": name, "level": "Undergraduate", "status": status}
        candidate.update(overrides)
        return _created(catalog.create_entity("courses", candidate))
    return factory


@pytest.fixture
def make_book(catalog, reference_data, make_author, make_publisher):
    """Factory creating books; creates a default author and publisher on first use"""
    defaults = {}

    def factory(title="La ciudad y los perros", status=Status.ACTIVE, **overrides):
        if "author_id" not in overrides and "author_id" not in defaults:
            defaults["author_id"] = make_author().id
        if "publisher_id" not in overrides and "publisher_id" not in defaults:
            defaults["publisher_id"] = make_publisher().id
        candidate = {
            "title": title,
            "total_copies": 5,
            "author_id": defaults.get("author_id"),
            "publisher_id": defaults.get("publisher_id"),
            "genre_id": reference_data["novel"],
            "course_id": None,
            "release_date": date(1963, 10, 1),
            "status": status,
        }
        candidate.update(overrides)
        return _created(catalog.create_entity("books", candidate))
    return factory


@pytest.fixture
def make_student(catalog, reference_data):
    def factory(dni="12345678", email="ana.torres@example.edu", status=Status.ACTIVE, **overrides):
        candidate = {
            "dni": dni,
            "first_name": "Ana",
            "last_name": "Torres",
            "email": email,
            "faculty_id": reference_data["engineering"],
            "status": status,
        }
        candidate.update(overrides)
        return _created(catalog.create_entity("students", candidate))
    return factory


@pytest.fixture
def make_location(catalog):
    def factory(name="Main Hall", shelves=None, **overrides):
        candidate = {
            "name": name,
            "description": "Ground floor",
            "shelves": shelves if shelves is not None else [{"code": "A1"}, {"code": "A2"}],
        }
        candidate.update(overrides)
        return _created(catalog.create_entity("locations", candidate))
    return factory
