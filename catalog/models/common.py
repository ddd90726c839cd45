# catalog/models/common.py
from typing import Annotated, Dict, List, Optional
from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints

from catalog.sa.models import Status

# Display-id prefixes, e.g. author 7 -> "AU0007"
AUTHOR_PREFIX = "AU"
BOOK_PREFIX = "BK"
PUBLISHER_PREFIX = "PB"
COURSE_PREFIX = "CR"
STUDENT_PREFIX = "ST"
RESERVATION_PREFIX = "RS"
LOCATION_PREFIX = "LC"


def _blank_to_none(value: str) -> Optional[str]:
    return value or None


def required_text(max_length: int):
    """Stripped, non-empty string no longer than its column"""
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=max_length)]


def optional_text(max_length: Optional[int] = None):
    """Stripped string or None; blank input is stored as None"""
    return Optional[Annotated[
        str,
        StringConstraints(strip_whitespace=True, max_length=max_length),
        AfterValidator(_blank_to_none),
    ]]


# Sizes follow the String(n) columns in catalog.sa.models
Name = required_text(255)
MediumName = required_text(150)
ShortName = required_text(100)
ShortText = required_text(50)
OptionalText = optional_text()
OptionalString = optional_text(255)
OptionalShortText = optional_text(50)
OptionalCode = optional_text(20)
OptionalUrl = optional_text(512)


def format_id(prefix: str, entity_id: Optional[int]) -> Optional[str]:
    if entity_id is None:
        return None
    return f"{prefix}{entity_id:04d}"


class View(BaseModel):
    """Base for read-only projection rows"""
    model_config = ConfigDict(from_attributes=True, frozen=True)


class Candidate(BaseModel):
    """Base for create/update input. Every field is written on update."""
    model_config = ConfigDict(extra="forbid")


class SelectOption(View):
    id: int
    name: str


class SelectOptions(BaseModel):
    options: Dict[str, List[SelectOption]]
    present: bool

    model_config = ConfigDict(frozen=True)


__all__ = [
    "Status",
    "Name",
    "MediumName",
    "ShortName",
    "ShortText",
    "OptionalText",
    "OptionalString",
    "OptionalShortText",
    "OptionalCode",
    "OptionalUrl",
    "format_id",
    "View",
    "Candidate",
    "SelectOption",
    "SelectOptions",
]
