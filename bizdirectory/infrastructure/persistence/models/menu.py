"""Menu ORM models: menu category and dish."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Index, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bizdirectory.infrastructure.persistence.database import Base
from bizdirectory.infrastructure.persistence.models.mixins import IntegerIdMixin


class MenuCategory(IntegerIdMixin, Base):
    """Menu category (e.g. Tacos, Bebidas). Table: menu_categories."""

    __tablename__ = "menu_categories"
    __id_column__ = "category_id"

    name: Mapped[str] = mapped_column("category_name", String(50), nullable=False)

    __table_args__ = (UniqueConstraint("category_name", name="uq_category_name"),)


class Dish(IntegerIdMixin, Base):
    """Dish on a business menu. Table: dishes. Index: business_id."""

    __tablename__ = "dishes"
    __id_column__ = "dish_id"

    business_id: Mapped[int] = mapped_column(
        ForeignKey("business.business_id", ondelete="CASCADE", name="fk_dish_business"),
        nullable=False,
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("menu_categories.category_id", name="fk_dish_category"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column("dish_name", String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    photo_url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_dishes_business", "business_id"),
        Index("idx_dishes_category", "category_id"),
    )
