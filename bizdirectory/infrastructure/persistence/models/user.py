"""User ORM model (read side). Owned by the account service; search reads name and avatar."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bizdirectory.infrastructure.persistence.database import Base
from bizdirectory.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntegerIdMixin,
)


class User(IntegerIdMixin, CreatedAtMixin, Base):
    """User entity. Table: users. A business owner shares its id with the business."""

    __tablename__ = "users"
    __id_column__ = "user_id"

    user_type: Mapped[str] = mapped_column(String(20), nullable=False, default="customer")
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
