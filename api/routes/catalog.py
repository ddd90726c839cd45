# api/routes/catalog.py
from catalog.services import FORM_OPTIONS, SERVICES
from .base import build_entity_router

routers = [
    build_entity_router(kind, service.candidate_schema, FORM_OPTIONS.get(kind))
    for kind, service in SERVICES.items()
]
