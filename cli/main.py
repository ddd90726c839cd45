# cli/main.py
import logging

import click
from .commands import db, list_entities, show, create, update, options

@click.group()
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
def cli(verbose: bool):
    """BookStudio catalog CLI"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

cli.add_command(db)
cli.add_command(list_entities)
cli.add_command(show)
cli.add_command(create)
cli.add_command(update)
cli.add_command(options)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
