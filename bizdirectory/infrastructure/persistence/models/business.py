"""Business ORM model. One business per owning user, keyed by the same identifier."""

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from bizdirectory.infrastructure.persistence.database import Base


class Business(Base):
    """Business entity. Table: business. Inactive businesses are hidden from search."""

    __tablename__ = "business"

    id: Mapped[int] = mapped_column(
        "business_id",
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
