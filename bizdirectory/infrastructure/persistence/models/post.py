"""Post (review) ORM model. Written by the review service; search reads aggregates."""

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    SmallInteger,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from bizdirectory.infrastructure.persistence.database import Base
from bizdirectory.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntegerIdMixin,
)


class Post(IntegerIdMixin, CreatedAtMixin, Base):
    """Review of a business by a user. Table: posts. One review per (author, business)."""

    __tablename__ = "posts"
    __id_column__ = "post_id"

    author_user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    reviewed_business_id: Mapped[int] = mapped_column(
        ForeignKey("business.business_id", ondelete="CASCADE"), nullable=False
    )
    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        UniqueConstraint(
            "author_user_id", "reviewed_business_id", name="uq_author_business_once"
        ),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_posts_rating_range"),
        Index("idx_posts_business_created", "reviewed_business_id", "created_at"),
    )
