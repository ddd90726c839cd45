# api/routes/base.py
from typing import List, Optional, Sequence, Type

from fastapi import APIRouter, Depends, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from catalog.models.common import Candidate
from catalog.results import NotFound, Result, Success, ValidationFailure
from catalog.sa.database import get_db
from catalog.services import CatalogService
from api.schemas.responses import ApiError, ApiResponse, FieldErrorSchema


def error_response(message: str, error_type: str, status_code: int, errors: Sequence = ()) -> JSONResponse:
    body = ApiError(
        message=message,
        error_type=error_type,
        status_code=status_code,
        errors=[FieldErrorSchema.model_validate(e) for e in errors],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def mutation_response(result: Result, success_status: int, failure_type: str) -> JSONResponse:
    """Map a create/update outcome to the response envelope"""
    if isinstance(result, Success):
        body = ApiResponse(data=result.payload)
        return JSONResponse(status_code=success_status, content=jsonable_encoder(body))
    if isinstance(result, NotFound):
        return error_response(result.message, "not_found", status.HTTP_404_NOT_FOUND)
    if isinstance(result, ValidationFailure):
        return error_response(result.message, failure_type, status.HTTP_400_BAD_REQUEST, result.errors)
    raise TypeError(f"Unexpected result: {result!r}")


def build_entity_router(
    kind: str,
    candidate_schema: Type[Candidate],
    select_kinds: Optional[List[str]] = None,
) -> APIRouter:
    """Create the list/get/create/update (and select-options) routes for one entity kind.

    Args:
        kind: Entity kind as registered in the catalog, also used as the URL segment
        candidate_schema: Request body model for create and update
        select_kinds: Choice lists served by GET /select-options, if the form needs any

    Returns:
        APIRouter mounted at /api/<kind>
    """
    router = APIRouter(prefix=f"/api/{kind}", tags=[kind])

    # Registered before /{entity_id} so the literal path wins
    if select_kinds:
        @router.get("/select-options")
        def get_select_options(db: Session = Depends(get_db)):
            options = CatalogService(db).get_select_options(select_kinds)
            if not options.present:
                return Response(status_code=status.HTTP_204_NO_CONTENT)
            return options.options

    @router.get("")
    def list_entities(db: Session = Depends(get_db)):
        rows = CatalogService(db).list_entities(kind)
        if not rows:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return rows

    @router.get("/{entity_id}")
    def get_entity(entity_id: int, db: Session = Depends(get_db)):
        result = CatalogService(db).get_entity(kind, entity_id)
        if isinstance(result, Success):
            return result.payload
        return error_response(result.message, "not_found", status.HTTP_404_NOT_FOUND)

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_entity(candidate: candidate_schema, db: Session = Depends(get_db)):
        result = CatalogService(db).create_entity(kind, candidate)
        return mutation_response(result, status.HTTP_201_CREATED, "creation_failed")

    @router.put("/{entity_id}")
    def update_entity(entity_id: int, candidate: candidate_schema, db: Session = Depends(get_db)):
        result = CatalogService(db).update_entity(kind, entity_id, candidate)
        return mutation_response(result, status.HTTP_200_OK, "update_failed")

    return router
