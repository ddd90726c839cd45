"""create_catalog_tables

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def _status():
    return sa.Column('status', sa.String(length=20), nullable=False)


def upgrade() -> None:
    # Lookup tables
    for table, length in (('nationality', 100), ('genre', 100), ('faculty', 150)):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=length), nullable=False, unique=True),
            *_timestamps(),
        )

    op.create_table(
        'course',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False, unique=True),
        sa.Column('level', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        _status(),
        *_timestamps(),
    )

    op.create_table(
        'publisher',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True),
        sa.Column('nationality_id', sa.Integer(), sa.ForeignKey('nationality.id'), nullable=False),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genre.id'), nullable=False),
        sa.Column('foundation_year', sa.Integer(), nullable=True),
        sa.Column('website', sa.String(length=255), nullable=True),
        sa.Column('address', sa.String(length=255), nullable=True),
        _status(),
        sa.Column('photo_url', sa.String(length=512), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_publisher_nationality_id', 'publisher', ['nationality_id'])
    op.create_index('idx_publisher_genre_id', 'publisher', ['genre_id'])

    op.create_table(
        'author',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True),
        sa.Column('nationality_id', sa.Integer(), sa.ForeignKey('nationality.id'), nullable=False),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genre.id'), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('biography', sa.Text(), nullable=True),
        _status(),
        sa.Column('photo_url', sa.String(length=512), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_author_nationality_id', 'author', ['nationality_id'])
    op.create_index('idx_author_genre_id', 'author', ['genre_id'])

    op.create_table(
        'book',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('total_copies', sa.Integer(), nullable=False),
        sa.Column('loaned_copies', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('author.id'), nullable=False),
        sa.Column('publisher_id', sa.Integer(), sa.ForeignKey('publisher.id'), nullable=False),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genre.id'), nullable=False),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('course.id'), nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        _status(),
        *_timestamps(),
        sa.CheckConstraint('loaned_copies >= 0', name='ck_book_loaned_copies'),
        sa.CheckConstraint('total_copies >= loaned_copies', name='ck_book_total_copies'),
    )
    op.create_index('idx_book_author_id', 'book', ['author_id'])
    op.create_index('idx_book_publisher_id', 'book', ['publisher_id'])
    op.create_index('idx_book_genre_id', 'book', ['genre_id'])

    op.create_table(
        'location',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'shelf',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('location.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=50), nullable=False),
        sa.Column('floor', sa.String(length=50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('location_id', 'position', name='uq_shelf_location_position'),
    )

    op.create_table(
        'student',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('dni', sa.String(length=8), nullable=False, unique=True),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(length=20), nullable=True),
        sa.Column('faculty_id', sa.Integer(), sa.ForeignKey('faculty.id'), nullable=False),
        _status(),
        *_timestamps(),
    )
    op.create_index('idx_student_faculty_id', 'student', ['faculty_id'])

    op.create_table(
        'reservation',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('book_id', sa.Integer(), sa.ForeignKey('book.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('student.id'), nullable=False),
        sa.Column('reservation_date', sa.Date(), nullable=False),
        _status(),
        *_timestamps(),
    )
    op.create_index('idx_reservation_book_id', 'reservation', ['book_id'])
    op.create_index('idx_reservation_student_id', 'reservation', ['student_id'])


def downgrade() -> None:
    # Reverse dependency order
    for table in (
        'reservation', 'student', 'shelf', 'location', 'book',
        'author', 'publisher', 'course', 'faculty', 'genre', 'nationality',
    ):
        op.drop_table(table)
