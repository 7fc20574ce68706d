"""Address ORM models: postal-code catalog and user address.

A user address points at a catalog entry by (postal_code, colonia); the
catalog entry carries the alcaldía (administrative area).
"""

from sqlalchemy import ForeignKey, ForeignKeyConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bizdirectory.infrastructure.persistence.database import Base


class PostalCodeCatalog(Base):
    """Postal-code catalog entry. Table: postal_code_catalog. Read-only reference data."""

    __tablename__ = "postal_code_catalog"

    postal_code: Mapped[str] = mapped_column(String(10), primary_key=True)
    colonia: Mapped[str] = mapped_column(String(100), primary_key=True)
    alcaldia: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (Index("idx_pcc_alcaldia", "alcaldia"),)


class UserAddress(Base):
    """User address. Table: users_address. At most one per user."""

    __tablename__ = "users_address"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    )
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    colonia: Mapped[str] = mapped_column(String(100), nullable=False)
    street: Mapped[str | None] = mapped_column(String(100), nullable=True)
    number: Mapped[str | None] = mapped_column(String(10), nullable=True)

    __table_args__ = (
        ForeignKeyConstraint(
            ["postal_code", "colonia"],
            ["postal_code_catalog.postal_code", "postal_code_catalog.colonia"],
            name="fk_ua_catalog",
        ),
        Index("idx_ua_cp_colonia", "postal_code", "colonia"),
    )
