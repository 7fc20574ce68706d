"""SQLAlchemy mixins for common model patterns.

Provides: IntegerIdMixin, CreatedAtMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class IntegerIdMixin:
    """Mixin for surrogate integer primary keys named after the table (e.g. dish_id)."""

    __id_column__: str = "id"

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(
            cls.__id_column__, Integer, primary_key=True, autoincrement=True
        )


class CreatedAtMixin:
    """Mixin for created_at (server default, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )
