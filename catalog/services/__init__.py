# catalog/services/__init__.py
from .base import EntityService
from .options import OptionAggregator, FORM_OPTIONS
from .registry import CatalogService, SERVICES

__all__ = [
    'EntityService',
    'OptionAggregator',
    'FORM_OPTIONS',
    'CatalogService',
    'SERVICES'
]
