import json

import click

from catalog.errors import DataIntegrityError
from catalog.services import CatalogService, FORM_OPTIONS
from ..utils import database_option, open_database, print_result, print_rows

KINDS = click.Choice(CatalogService.kinds())

# Columns shown by `list` for each kind, the rest are visible through `show`
LIST_COLUMNS = {
    'authors': ['formatted_id', 'name', 'nationality_name', 'genre_name', 'status'],
    'books': ['formatted_id', 'title', 'available_copies', 'loaned_copies', 'author_name', 'publisher_name', 'status'],
    'publishers': ['formatted_id', 'name', 'nationality_name', 'genre_name', 'status'],
    'courses': ['formatted_id', 'name', 'level', 'status'],
    'students': ['formatted_id', 'dni', 'first_name', 'last_name', 'email', 'faculty_name', 'status'],
    'reservations': ['formatted_id', 'book_title', 'student_name', 'reservation_date', 'status'],
    'locations': ['formatted_id', 'name', 'shelf_count'],
}


def _run(database_url, action):
    database = open_database(database_url)
    session = database.get_session()
    try:
        return action(CatalogService(session))
    except DataIntegrityError as e:
        raise click.ClickException(f"Data integrity error: {e}")
    finally:
        session.close()
        database.dispose()


def _load_payload(payload: str) -> dict:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint='PAYLOAD')


@click.command(name="list")
@click.argument('kind', type=KINDS)
@database_option
def list_entities(kind: str, database_url: str | None):
    """List every KIND record, newest first"""
    rows = _run(database_url, lambda catalog: catalog.list_entities(kind))
    if not rows:
        click.echo(f"No {kind} found.")
        return
    print_rows(rows, LIST_COLUMNS.get(kind, ['id', 'name']))


@click.command()
@click.argument('kind', type=KINDS)
@click.argument('entity_id', type=int)
@database_option
def show(kind: str, entity_id: int, database_url: str | None):
    """Show the full detail view of one KIND record"""
    _run(database_url, lambda catalog: print_result(catalog.get_entity(kind, entity_id)))


@click.command()
@click.argument('kind', type=KINDS)
@click.argument('payload')
@database_option
def create(kind: str, payload: str, database_url: str | None):
    """Create a KIND record from a JSON PAYLOAD"""
    data = _load_payload(payload)
    _run(database_url, lambda catalog: print_result(catalog.create_entity(kind, data)))


@click.command()
@click.argument('kind', type=KINDS)
@click.argument('entity_id', type=int)
@click.argument('payload')
@database_option
def update(kind: str, entity_id: int, payload: str, database_url: str | None):
    """Replace a KIND record with the JSON PAYLOAD (every field is written)"""
    data = _load_payload(payload)
    _run(database_url, lambda catalog: print_result(catalog.update_entity(kind, entity_id, data)))


@click.command()
@click.argument('kinds', nargs=-1)
@click.option('--form', type=click.Choice(list(FORM_OPTIONS)), default=None, help="Use the choice lists of this entity's form")
@database_option
def options(kinds: tuple, form: str | None, database_url: str | None):
    """Print select options for KINDS

    Example:
        bookstudio options authors genres
        bookstudio options --form books
    """
    if form:
        kinds = tuple(FORM_OPTIONS[form]) + kinds
    if not kinds:
        raise click.UsageError("Give at least one kind or --form")
    unknown = [k for k in kinds if k not in CatalogService.kinds()]
    if unknown:
        raise click.BadParameter(f"Unknown kinds: {', '.join(unknown)}", param_hint='KINDS')

    result = _run(database_url, lambda catalog: catalog.get_select_options(kinds))
    if not result.present:
        click.echo("No select options found.")
        return
    for kind, items in result.options.items():
        click.echo(click.style(f"{kind}:", fg='blue'))
        for item in items:
            click.echo(f"  {item.id}: {item.name}")
