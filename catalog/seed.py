# catalog/seed.py
"""Demo data for a fresh catalog database."""
import logging
from datetime import date
from typing import Dict

from catalog.results import Success, ValidationFailure
from catalog.sa.models import Status
from catalog.services import CatalogService

logger = logging.getLogger(__name__)

NATIONALITIES = ["Peruvian", "Colombian", "Argentine", "British"]
GENRES = ["Novel", "Poetry", "Short Story", "Science"]
FACULTIES = ["Engineering", "Humanities", "Medicine"]

COURSES = [
    {"name": "Literature I", "level": "Undergraduate", "status": Status.ACTIVE},
    {"name": "Physics I", "level": "Undergraduate", "status": Status.ACTIVE},
]

PUBLISHERS = [
    {"name": "Editorial Sudamericana", "nationality": "Argentine", "genre": "Novel",
     "foundation_year": 1939, "status": Status.ACTIVE},
    {"name": "Penguin Books", "nationality": "British", "genre": "Novel",
     "foundation_year": 1935, "website": "https://www.penguin.co.uk", "status": Status.ACTIVE},
]

AUTHORS = [
    {"name": "Mario Vargas Llosa", "nationality": "Peruvian", "genre": "Novel",
     "birth_date": date(1936, 3, 28), "status": Status.ACTIVE},
    {"name": "Gabriel García Márquez", "nationality": "Colombian", "genre": "Novel",
     "birth_date": date(1927, 3, 6), "status": Status.ACTIVE},
    {"name": "César Vallejo", "nationality": "Peruvian", "genre": "Poetry",
     "birth_date": date(1892, 3, 16), "status": Status.INACTIVE},
]

BOOKS = [
    {"title": "La ciudad y los perros", "author": "Mario Vargas Llosa", "publisher": "Editorial Sudamericana",
     "genre": "Novel", "course": "Literature I", "total_copies": 5, "release_date": date(1963, 10, 1)},
    {"title": "Cien años de soledad", "author": "Gabriel García Márquez", "publisher": "Editorial Sudamericana",
     "genre": "Novel", "course": None, "total_copies": 3, "release_date": date(1967, 5, 30)},
]

LOCATIONS = [
    {"name": "Main Hall", "description": "Ground floor reading room",
     "shelves": [{"code": "A1", "floor": "1"}, {"code": "A2", "floor": "1"}]},
]


def seed_demo(catalog: CatalogService) -> Dict[str, int]:
    """Create the demo records, skipping any that already exist.

    Returns:
        Number of records created per entity kind
    """
    created: Dict[str, int] = {}
    ids: Dict[str, Dict[str, int]] = {}

    def add(kind: str, key: str, candidate: dict) -> None:
        result = catalog.create_entity(kind, candidate)
        if isinstance(result, Success):
            created[kind] = created.get(kind, 0) + 1
            ids.setdefault(kind, {})[key] = result.payload.id
        elif isinstance(result, ValidationFailure):
            logger.info(f"Skipping {kind} '{key}': {result.message}")

    def lookup(kind: str, key: str) -> int:
        if key not in ids.get(kind, {}):
            for option in catalog.service_for(kind).get_list():
                ids.setdefault(kind, {})[getattr(option, 'name', None) or getattr(option, 'title')] = option.id
        return ids[kind][key]

    for name in NATIONALITIES:
        add('nationalities', name, {"name": name})
    for name in GENRES:
        add('genres', name, {"name": name})
    for name in FACULTIES:
        add('faculties', name, {"name": name})
    for course in COURSES:
        add('courses', course["name"], course)

    for publisher in PUBLISHERS:
        data = {k: v for k, v in publisher.items() if k not in ("nationality", "genre")}
        data["nationality_id"] = lookup('nationalities', publisher["nationality"])
        data["genre_id"] = lookup('genres', publisher["genre"])
        add('publishers', publisher["name"], data)

    for author in AUTHORS:
        data = {k: v for k, v in author.items() if k not in ("nationality", "genre")}
        data["nationality_id"] = lookup('nationalities', author["nationality"])
        data["genre_id"] = lookup('genres', author["genre"])
        add('authors', author["name"], data)

    existing_titles = {book.title for book in catalog.list_entities('books')}
    for book in BOOKS:
        if book["title"] in existing_titles:
            continue
        add('books', book["title"], {
            "title": book["title"],
            "total_copies": book["total_copies"],
            "author_id": lookup('authors', book["author"]),
            "publisher_id": lookup('publishers', book["publisher"]),
            "genre_id": lookup('genres', book["genre"]),
            "course_id": lookup('courses', book["course"]) if book["course"] else None,
            "release_date": book["release_date"],
            "status": Status.ACTIVE,
        })

    for location in LOCATIONS:
        add('locations', location["name"], location)

    logger.info(f"Seeded demo data: {created}")
    return created
