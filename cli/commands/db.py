import click

from catalog.seed import seed_demo
from catalog.services import CatalogService
from ..utils import database_option, open_database

@click.group()
def db():
    """Database management commands"""
    pass

@db.command(name="init")
@database_option
def init_db(database_url: str | None):
    """Create any missing catalog tables"""
    database = open_database(database_url)
    try:
        database.init_db()
    finally:
        database.dispose()
    click.echo(click.style("Schema ready", fg='green'))

@db.command()
@database_option
def seed(database_url: str | None):
    """Load demo nationalities, genres, authors, books and locations"""
    database = open_database(database_url)
    database.init_db()
    session = database.get_session()
    try:
        created = seed_demo(CatalogService(session))
    finally:
        session.close()
        database.dispose()

    if not created:
        click.echo("Nothing to seed, demo data already present")
        return
    for kind, count in created.items():
        click.echo(click.style(f"{kind}: ", fg='blue') + click.style(str(count), fg='cyan'))
