import json
from typing import Any, Iterable

import click
from pydantic import BaseModel

from catalog.results import NotFound, Result, Success, ValidationFailure
from catalog.sa.database import Database

database_option = click.option(
    '--database-url', '--db',
    envvar='DATABASE_URL',
    default=None,
    help="SQLAlchemy database URL (defaults to DATABASE_URL or sqlite:///bookstudio.db)",
)


def open_database(database_url: str | None) -> Database:
    return Database(database_url)


def dump(model: BaseModel) -> str:
    return json.dumps(model.model_dump(mode='json'), indent=2, ensure_ascii=False)


def print_rows(rows: Iterable[BaseModel], columns: list[str]) -> None:
    """Print projection rows as a simple aligned table"""
    data = [[str(row.model_dump(mode='json').get(c, '')) for c in columns] for row in rows]
    widths = [max([len(c)] + [len(r[i]) for r in data]) for i, c in enumerate(columns)]
    click.echo(click.style("  ".join(c.ljust(w) for c, w in zip(columns, widths)), fg='blue'))
    for r in data:
        click.echo("  ".join(v.ljust(w) for v, w in zip(r, widths)))


def print_result(result: Result) -> Any:
    """Echo a service outcome and abort with a non-zero exit code on failure"""
    if isinstance(result, Success):
        click.echo(dump(result.payload))
        return result.payload
    if isinstance(result, NotFound):
        raise click.ClickException(result.message)
    if isinstance(result, ValidationFailure):
        for error in result.errors:
            click.echo(click.style(f"{error.field}: {error.message}", fg='red'), err=True)
        raise click.ClickException("Validation failed")
    raise click.ClickException(f"Unexpected result: {result!r}")
