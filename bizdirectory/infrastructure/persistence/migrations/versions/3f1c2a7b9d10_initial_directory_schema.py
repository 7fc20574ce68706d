"""Initial schema: users, business, address catalog, menu, posts

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7b9d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial schema."""
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_type", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("avatar_url", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id"),
    )

    op.create_table(
        "business",
        sa.Column("business_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.ForeignKeyConstraint(["business_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("business_id"),
    )

    op.create_table(
        "postal_code_catalog",
        sa.Column("postal_code", sa.String(length=10), nullable=False),
        sa.Column("colonia", sa.String(length=100), nullable=False),
        sa.Column("alcaldia", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("postal_code", "colonia"),
    )
    op.create_index("idx_pcc_alcaldia", "postal_code_catalog", ["alcaldia"])

    op.create_table(
        "users_address",
        sa.Column("user_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("postal_code", sa.String(length=10), nullable=False),
        sa.Column("colonia", sa.String(length=100), nullable=False),
        sa.Column("street", sa.String(length=100), nullable=True),
        sa.Column("number", sa.String(length=10), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["postal_code", "colonia"],
            ["postal_code_catalog.postal_code", "postal_code_catalog.colonia"],
            name="fk_ua_catalog",
        ),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("idx_ua_cp_colonia", "users_address", ["postal_code", "colonia"])

    op.create_table(
        "menu_categories",
        sa.Column("category_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("category_id"),
        sa.UniqueConstraint("category_name", name="uq_category_name"),
    )

    op.create_table(
        "dishes",
        sa.Column("dish_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("business_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("dish_name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("photo_url", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(
            ["business_id"],
            ["business.business_id"],
            name="fk_dish_business",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["category_id"], ["menu_categories.category_id"], name="fk_dish_category"
        ),
        sa.PrimaryKeyConstraint("dish_id"),
    )
    op.create_index("idx_dishes_business", "dishes", ["business_id"])
    op.create_index("idx_dishes_category", "dishes", ["category_id"])

    op.create_table(
        "posts",
        sa.Column("post_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_user_id", sa.Integer(), nullable=False),
        sa.Column("reviewed_business_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.SmallInteger(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_posts_rating_range"),
        sa.ForeignKeyConstraint(["author_user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["reviewed_business_id"], ["business.business_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("post_id"),
        sa.UniqueConstraint(
            "author_user_id", "reviewed_business_id", name="uq_author_business_once"
        ),
    )
    op.create_index(
        "idx_posts_business_created", "posts", ["reviewed_business_id", "created_at"]
    )


def downgrade() -> None:
    """Drop schema."""
    op.drop_index("idx_posts_business_created", table_name="posts")
    op.drop_table("posts")
    op.drop_index("idx_dishes_category", table_name="dishes")
    op.drop_index("idx_dishes_business", table_name="dishes")
    op.drop_table("dishes")
    op.drop_table("menu_categories")
    op.drop_index("idx_ua_cp_colonia", table_name="users_address")
    op.drop_table("users_address")
    op.drop_index("idx_pcc_alcaldia", table_name="postal_code_catalog")
    op.drop_table("postal_code_catalog")
    op.drop_table("business")
    op.drop_table("users")
