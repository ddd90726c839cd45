# tests/test_services/test_mutations.py
from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import DataError

from catalog.errors import UnknownEntityKind
from catalog.models import AuthorCandidate
from catalog.results import NotFound, Success, ValidationFailure
from catalog.sa.models import Author, Book, Genre, Shelf, Status, Student


def count(session, model):
    return session.execute(select(func.count()).select_from(model)).scalar()


def author_payload(reference_data, **overrides):
    payload = {
        "name": "Gabriel García Márquez",
        "nationality_id": reference_data["colombian"],
        "genre_id": reference_data["novel"],
        "birth_date": date(1927, 3, 6),
        "status": "active",
    }
    payload.update(overrides)
    return payload


# Create

def test_create_author_returns_joined_info(catalog, reference_data):
    result = catalog.create_entity("authors", author_payload(reference_data))

    assert isinstance(result, Success)
    info = result.payload
    assert info.id is not None
    assert info.nationality_name == "Colombian"
    assert info.genre_name == "Novel"
    assert info.status == Status.ACTIVE


def test_create_accepts_candidate_model(catalog, reference_data):
    candidate = AuthorCandidate(**author_payload(reference_data))
    result = catalog.create_entity("authors", candidate)
    assert isinstance(result, Success)
    assert result.payload.name == "Gabriel García Márquez"


def test_info_names_follow_current_reference_names(catalog, db_session, make_author, reference_data):
    author = make_author()
    catalog.update_entity("genres", reference_data["novel"], {"name": "Contemporary Novel"})

    info = catalog.get_entity("authors", author.id).payload
    assert info.genre_name == "Contemporary Novel"


def test_duplicate_author_name_is_rejected(catalog, db_session, make_author, reference_data):
    make_author(name="Isabel Allende")
    before = count(db_session, Author)

    result = catalog.create_entity("authors", author_payload(reference_data, name="Isabel Allende"))

    assert isinstance(result, ValidationFailure)
    assert result.error_for("name").code == "duplicate"
    assert count(db_session, Author) == before


def test_book_with_missing_author_is_not_persisted(catalog, db_session, make_publisher, reference_data):
    publisher = make_publisher()

    result = catalog.create_entity("books", {
        "title": "Ghost Book",
        "total_copies": 2,
        "author_id": 999,
        "publisher_id": publisher.id,
        "genre_id": reference_data["novel"],
        "status": "active",
    })

    assert isinstance(result, ValidationFailure)
    error = result.error_for("author_id")
    assert error.code == "not_found"
    assert error.message == "Author not found."
    assert count(db_session, Book) == 0


def test_every_failing_reference_is_reported(catalog, db_session):
    result = catalog.create_entity("books", {
        "title": "Nowhere",
        "total_copies": 1,
        "author_id": 901,
        "publisher_id": 902,
        "genre_id": 903,
        "course_id": 904,
        "status": "active",
    })

    assert isinstance(result, ValidationFailure)
    assert {e.field for e in result.errors} == {"author_id", "publisher_id", "genre_id", "course_id"}


def test_inactive_reference_rejected_on_create(catalog, make_author, make_publisher, reference_data):
    retired = make_author(name="Retired", status=Status.INACTIVE)
    publisher = make_publisher()

    result = catalog.create_entity("books", {
        "title": "Late Work",
        "total_copies": 1,
        "author_id": retired.id,
        "publisher_id": publisher.id,
        "genre_id": reference_data["novel"],
        "status": "active",
    })

    assert isinstance(result, ValidationFailure)
    assert result.error_for("author_id").code == "inactive"


def test_unchanged_inactive_reference_allowed_on_update(catalog, make_book):
    book = make_book()
    author = catalog.get_entity("authors", book.author_id).payload
    deactivated = author.model_dump(include={"name", "nationality_id", "genre_id", "birth_date"})
    catalog.update_entity("authors", author.id, {**deactivated, "status": "inactive"})

    result = catalog.update_entity("books", book.id, {
        "title": "La ciudad y los perros (2nd ed.)",
        "total_copies": 6,
        "author_id": book.author_id,
        "publisher_id": book.publisher_id,
        "genre_id": book.genre_id,
        "status": "active",
    })

    assert isinstance(result, Success)
    assert result.payload.title == "La ciudad y los perros (2nd ed.)"


def book_payload(book, **overrides):
    payload = {
        "title": book.title,
        "total_copies": book.total_copies,
        "author_id": book.author_id,
        "publisher_id": book.publisher_id,
        "genre_id": book.genre_id,
        "course_id": book.course_id,
        "release_date": book.release_date,
        "status": book.status,
    }
    payload.update(overrides)
    return payload


def test_switching_to_an_inactive_author_is_rejected(catalog, make_book, make_author):
    book = make_book()
    retired = make_author(name="José María Arguedas", status=Status.INACTIVE)

    result = catalog.update_entity("books", book.id, book_payload(book, author_id=retired.id, title="Changed"))

    assert isinstance(result, ValidationFailure)
    assert result.error_for("author_id").code == "inactive"
    assert catalog.get_entity("books", book.id).payload == book


def test_switching_to_a_missing_author_is_rejected(catalog, make_book):
    book = make_book()

    result = catalog.update_entity("books", book.id, book_payload(book, author_id=999, total_copies=9))

    assert isinstance(result, ValidationFailure)
    error = result.error_for("author_id")
    assert error.code == "not_found"
    assert error.message == "Author not found."
    assert catalog.get_entity("books", book.id).payload == book


def test_status_is_required(catalog, db_session, reference_data):
    payload = author_payload(reference_data)
    del payload["status"]

    result = catalog.create_entity("authors", payload)

    assert isinstance(result, ValidationFailure)
    assert result.error_for("status") is not None
    assert count(db_session, Author) == 0


def test_unknown_status_is_invalid(catalog, reference_data):
    result = catalog.create_entity("authors", author_payload(reference_data, status="retired"))
    assert isinstance(result, ValidationFailure)
    assert result.error_for("status").code == "invalid"


def test_values_longer_than_their_column_are_invalid(catalog, db_session, reference_data):
    too_long = catalog.create_entity("genres", {"name": "x" * 101})
    assert isinstance(too_long, ValidationFailure)
    assert too_long.error_for("name").code == "invalid"
    assert count(db_session, Genre) == 2

    assert isinstance(catalog.create_entity("faculties", {"name": "f" * 150}), Success)
    assert isinstance(catalog.create_entity("faculties", {"name": "f" * 151}), ValidationFailure)

    student = catalog.create_entity("students", {
        "dni": "87654321",
        "first_name": "Rosa",
        "last_name": "Quispe",
        "email": "rosa@example.edu",
        "phone": "9" * 21,
        "gender": "g" * 21,
        "faculty_id": reference_data["engineering"],
        "status": "active",
    })
    assert isinstance(student, ValidationFailure)
    assert {e.field for e in student.errors} == {"phone", "gender"}


def test_store_rejecting_a_value_is_reported(catalog, db_session, monkeypatch):
    def refuse():
        raise DataError("INSERT INTO genre", {}, Exception("value too long for type character varying(100)"))

    monkeypatch.setattr(db_session, "commit", refuse)

    result = catalog.create_entity("genres", {"name": "Essay"})

    assert isinstance(result, ValidationFailure)
    assert result.errors[0].code == "invalid"
    assert count(db_session, Genre) == 0


def test_blank_optional_text_is_cleared(catalog, make_author, reference_data):
    author = make_author(biography="   ", photo_url="")
    assert author.biography is None
    assert author.photo_url is None

    result = catalog.update_entity("authors", author.id, author_payload(
        reference_data, name=author.name, biography="\t",
    ))
    assert result.payload.biography is None


def test_unknown_kind_raises(catalog):
    with pytest.raises(UnknownEntityKind):
        catalog.list_entities("dragons")


# Update

def test_update_missing_id_is_not_found(catalog, db_session, make_author, reference_data):
    make_author()
    before = count(db_session, Author)

    result = catalog.update_entity("authors", 999, author_payload(reference_data))

    assert isinstance(result, NotFound)
    assert result.message == "Author not found."
    assert count(db_session, Author) == before


def test_get_missing_id_is_not_found(catalog):
    result = catalog.get_entity("books", 42)
    assert isinstance(result, NotFound)
    assert result.kind == "books"
    assert result.entity_id == 42


def test_update_keeps_own_name(catalog, make_author, reference_data):
    author = make_author(name="Julio Cortázar")

    result = catalog.update_entity("authors", author.id, author_payload(
        reference_data, name="Julio Cortázar", biography="Rayuela",
    ))

    assert isinstance(result, Success)
    assert result.payload.biography == "Rayuela"


def test_update_to_someone_elses_name_fails(catalog, make_author, reference_data):
    make_author(name="Julio Cortázar")
    other = make_author(name="Ernesto Sabato")

    result = catalog.update_entity("authors", other.id, author_payload(reference_data, name="Julio Cortázar"))

    assert isinstance(result, ValidationFailure)
    assert result.error_for("name").code == "duplicate"
    assert catalog.get_entity("authors", other.id).payload.name == "Ernesto Sabato"


def test_update_replaces_whole_record(catalog, make_author, reference_data):
    """Fields left out of the update are cleared, not inherited"""
    author = make_author(biography="Long biography", photo_url="http://example.com/a.jpg")

    result = catalog.update_entity("authors", author.id, author_payload(reference_data, name=author.name))

    assert isinstance(result, Success)
    assert result.payload.biography is None
    assert result.payload.photo_url is None
    assert result.payload.nationality_name == "Colombian"


def test_status_transition_via_update(catalog, make_author, reference_data):
    author = make_author()
    result = catalog.update_entity(
        "authors", author.id, author_payload(reference_data, name=author.name, status="inactive")
    )
    assert result.payload.status == Status.INACTIVE
    assert author.id not in [o.id for o in catalog.service_for("authors").get_for_select()]


def test_total_copies_cannot_drop_below_loaned(catalog, db_session, make_book):
    book = make_book()
    db_session.get(Book, book.id).loaned_copies = 3
    db_session.commit()

    result = catalog.update_entity("books", book.id, {
        "title": book.title,
        "total_copies": 2,
        "author_id": book.author_id,
        "publisher_id": book.publisher_id,
        "genre_id": book.genre_id,
        "status": "active",
    })

    assert isinstance(result, ValidationFailure)
    assert result.error_for("total_copies").code == "invalid"
    assert catalog.get_entity("books", book.id).payload.total_copies == 5


def test_update_does_not_touch_loaned_copies(catalog, db_session, make_book):
    book = make_book()
    db_session.get(Book, book.id).loaned_copies = 2
    db_session.commit()

    result = catalog.update_entity("books", book.id, {
        "title": book.title,
        "total_copies": 4,
        "author_id": book.author_id,
        "publisher_id": book.publisher_id,
        "genre_id": book.genre_id,
        "status": "active",
    })

    assert result.payload.loaned_copies == 2
    assert result.payload.available_copies == 2


def test_student_unique_fields_exclude_self(catalog, make_student, reference_data):
    make_student(dni="11111111", email="first@example.edu")
    second = make_student(dni="22222222", email="second@example.edu")
    payload = {
        "dni": "22222222",
        "first_name": "Luis",
        "last_name": "Quispe",
        "email": "SECOND@example.edu",
        "faculty_id": reference_data["engineering"],
        "status": "active",
    }

    assert isinstance(catalog.update_entity("students", second.id, payload), Success)

    clash = catalog.update_entity("students", second.id, {**payload, "dni": "11111111", "email": "first@example.edu"})
    assert isinstance(clash, ValidationFailure)
    assert {e.field for e in clash.errors} == {"dni", "email"}


def test_malformed_student_input(catalog, db_session, reference_data):
    result = catalog.create_entity("students", {
        "dni": "12AB",
        "first_name": "Ana",
        "last_name": "Torres",
        "email": "not-an-email",
        "faculty_id": reference_data["engineering"],
        "status": "active",
    })
    assert isinstance(result, ValidationFailure)
    assert {e.field for e in result.errors} == {"dni", "email"}
    assert count(db_session, Student) == 0


def test_database_constraint_becomes_conflict(catalog, db_session, monkeypatch, make_author, reference_data):
    """A duplicate that slips past the pre-check is still refused"""
    make_author(name="Race Condition")
    monkeypatch.setattr("catalog.services.base.check_unique", lambda *args, **kwargs: None)

    result = catalog.create_entity("authors", author_payload(reference_data, name="Race Condition"))

    assert isinstance(result, ValidationFailure)
    assert result.errors[0].code == "conflict"
    assert count(db_session, Author) == 1


def test_reference_data_crud(catalog, db_session):
    created = catalog.create_entity("genres", {"name": "Essay"})
    assert isinstance(created, Success)

    duplicate = catalog.create_entity("genres", {"name": "Essay"})
    assert isinstance(duplicate, ValidationFailure)

    renamed = catalog.update_entity("genres", created.payload.id, {"name": "Essays"})
    assert renamed.payload.name == "Essays"
    assert db_session.get(Genre, created.payload.id).name == "Essays"


def test_reservation_requires_existing_book_and_student(catalog, make_book, make_student):
    book = make_book()
    student = make_student()

    missing = catalog.create_entity("reservations", {
        "book_id": 999, "student_id": student.id, "reservation_date": "2026-06-01", "status": "active",
    })
    assert missing.error_for("book_id").message == "Book not found."

    result = catalog.create_entity("reservations", {
        "book_id": book.id, "student_id": student.id, "reservation_date": "2026-06-01", "status": "active",
    })
    assert isinstance(result, Success)
    assert result.payload.book_title == book.title
    assert result.payload.student_name == "Ana Torres"


# Locations and shelves

def test_location_update_replaces_shelf_sequence(catalog, db_session, make_location):
    location = make_location(shelves=[{"code": "OLD1"}, {"code": "OLD2"}, {"code": "OLD3"}, {"code": "OLD4"}])

    result = catalog.update_entity("locations", location.id, {
        "name": location.name,
        "shelves": [{"code": "A"}, {"code": "B"}, {"code": "C"}],
    })

    assert isinstance(result, Success)
    assert [shelf.code for shelf in result.payload.shelves] == ["A", "B", "C"]
    assert [shelf.position for shelf in result.payload.shelves] == [0, 1, 2]

    reread = catalog.get_entity("locations", location.id).payload
    assert [shelf.code for shelf in reread.shelves] == ["A", "B", "C"]
    assert count(db_session, Shelf) == 3


def test_location_update_upserts_by_position(catalog, make_location):
    location = make_location(shelves=[{"code": "A1"}, {"code": "A2"}])
    original_ids = [shelf.id for shelf in location.shelves]

    result = catalog.update_entity("locations", location.id, {
        "name": location.name,
        "shelves": [{"code": "X1", "floor": "2"}, {"code": "X2"}, {"code": "X3"}],
    })

    shelves = result.payload.shelves
    assert [shelf.id for shelf in shelves[:2]] == original_ids
    assert shelves[0].floor == "2"
    assert shelves[2].code == "X3"


def test_location_update_with_no_shelves_clears_them(catalog, db_session, make_location):
    location = make_location()

    result = catalog.update_entity("locations", location.id, {"name": location.name})

    assert result.payload.shelves == []
    assert count(db_session, Shelf) == 0


def test_shelves_belong_to_their_location(catalog, db_session, make_location):
    first = make_location(name="North Wing", shelves=[{"code": "N1"}])
    second = make_location(name="South Wing", shelves=[{"code": "S1"}, {"code": "S2"}])

    catalog.update_entity("locations", first.id, {"name": "North Wing", "shelves": []})

    assert [s.code for s in catalog.get_entity("locations", second.id).payload.shelves] == ["S1", "S2"]


def test_repeated_shelf_code_is_rejected(catalog, db_session, make_location):
    location = make_location()

    result = catalog.update_entity("locations", location.id, {
        "name": location.name,
        "shelves": [{"code": "A"}, {"code": "A"}],
    })

    assert isinstance(result, ValidationFailure)
    assert result.error_for("shelves.1.code").code == "duplicate"
    assert [s.code for s in catalog.get_entity("locations", location.id).payload.shelves] == ["A1", "A2"]
