from .db import db
from .catalog import list_entities, show, create, update, options

__all__ = ['db', 'list_entities', 'show', 'create', 'update', 'options']
