# catalog/sa/models/base.py
from datetime import datetime, UTC
from enum import Enum
from sqlalchemy import DateTime, Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped

class Status(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

class Base(DeclarativeBase):
    """Base class for all models"""
    pass

class TimestampMixin:
    """Mixin to add created_at and updated_at columns"""
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

def status_column() -> Mapped[Status]:
    """Status stored as its string value ('active' / 'inactive')"""
    return mapped_column(
        SAEnum(Status, native_enum=False, length=20, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
