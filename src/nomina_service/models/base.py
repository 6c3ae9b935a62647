"""Base model class for SQLAlchemy ORM."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    type_annotation_map = {
        datetime: DateTime(timezone=True),
    }

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary keyed by attribute name."""
        return {
            attr.key: getattr(self, attr.key)
            for attr in self.__mapper__.column_attrs
        }


class TimestampMixin:
    """Mixin for models with a creation timestamp."""

    created_at: Mapped[datetime] = mapped_column(
        "fechaCreacion",
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
