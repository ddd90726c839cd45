# api/schemas/responses.py
from typing import Any, List
from pydantic import BaseModel, ConfigDict


class FieldErrorSchema(BaseModel):
    field: str
    code: str
    message: str

    model_config = ConfigDict(from_attributes=True)


class ApiResponse(BaseModel):
    success: bool = True
    data: Any


class ApiError(BaseModel):
    success: bool = False
    message: str
    error_type: str
    status_code: int
    errors: List[FieldErrorSchema] = []
