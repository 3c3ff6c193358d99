"""create_catalog_tables

Revision ID: 7c1e4a9d2b50
Revises:
Create Date: 2026-03-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "7c1e4a9d2b50"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*, mutable: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create users, apis, reviews, request_history and api_keys."""
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column("email", sa.String(length=255), nullable=False, comment="Unique email address"),
        sa.Column("name", sa.String(length=100), nullable=True, comment="Display name"),
        sa.Column("avatar_url", sa.String(length=500), nullable=True, comment="Avatar image URL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "apis",
        *_timestamps(),
        sa.Column("name", sa.String(length=200), nullable=False, comment="Display name (e.g., 'PokeAPI')"),
        sa.Column("description", sa.Text(), nullable=False, comment="Free-text description"),
        sa.Column("base_url", sa.String(length=500), nullable=False, comment="Root URL of the API"),
        sa.Column("category", sa.String(length=100), nullable=False, comment="Catalog category"),
        sa.Column("auth_type", sa.String(length=50), nullable=True, comment="Auth requirement label (e.g., 'None', 'Api Key')"),
        sa.Column("rate_limit", sa.String(length=100), nullable=True, comment="Rate limit label (e.g., '100/min')"),
        sa.Column("https", sa.Boolean(), nullable=False, comment="Served over HTTPS"),
        sa.Column("cors_policy", sa.String(length=50), nullable=True, comment="CORS support label ('Yes', 'No', 'Unknown')"),
        sa.Column("documentation_url", sa.String(length=500), nullable=True, comment="Documentation link"),
        sa.Column("featured", sa.Boolean(), nullable=False, comment="Shown in the featured set"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_apis_name", "apis", ["name"])
    op.create_index("ix_apis_category", "apis", ["category"])
    op.create_index("idx_apis_created_id", "apis", ["created_at", "id"])
    op.create_index("idx_apis_featured_created", "apis", ["featured", "created_at"])

    op.create_table(
        "reviews",
        *_timestamps(),
        sa.Column("api_id", sa.Uuid(), nullable=False, comment="Reviewed listing"),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="Author"),
        sa.Column("rating", sa.Integer(), nullable=False, comment="Score between 1 and 5"),
        sa.Column("content", sa.Text(), nullable=True, comment="Optional comment"),
        sa.Column(
            "helpful_count",
            sa.Integer(),
            server_default="0",
            nullable=False,
            comment="Net helpfulness votes (may be negative)",
        ),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        sa.ForeignKeyConstraint(["api_id"], ["apis.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reviews_user_id", "reviews", ["user_id"])
    op.create_index("idx_reviews_api_created", "reviews", ["api_id", "created_at"])
    op.create_index("idx_reviews_api_rating", "reviews", ["api_id", "rating"])

    op.create_table(
        "request_history",
        *_timestamps(mutable=False),
        sa.Column("user_id", sa.Uuid(), nullable=True, comment="Owner"),
        sa.Column("api_id", sa.Uuid(), nullable=True, comment="Targeted listing"),
        sa.Column("method", sa.String(length=10), nullable=False, comment="HTTP method as sent"),
        sa.Column("url", sa.Text(), nullable=False, comment="URL as sent"),
        sa.Column("headers", sa.JSON(), nullable=True, comment="Request headers as sent"),
        sa.Column("body", sa.Text(), nullable=True, comment="Request body as sent"),
        sa.Column("response_status", sa.Integer(), nullable=True, comment="HTTP status received (0 when no response)"),
        sa.Column("response_body", sa.Text(), nullable=True, comment="Raw response text"),
        sa.Column("response_time", sa.Integer(), nullable=True, comment="Elapsed milliseconds"),
        sa.ForeignKeyConstraint(["api_id"], ["apis.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_request_history_user_created", "request_history", ["user_id", "created_at"]
    )
    op.create_index("idx_request_history_created", "request_history", ["created_at"])

    op.create_table(
        "api_keys",
        *_timestamps(),
        sa.Column("name", sa.String(length=100), nullable=False, comment="User-chosen label"),
        sa.Column("service", sa.String(length=100), nullable=False, comment="Service the key belongs to"),
        sa.Column("encrypted_key", sa.LargeBinary(), nullable=False, comment="AES-256-GCM encrypted secret"),
        sa.Column("environment", sa.String(length=50), nullable=True, comment="Environment label (e.g., 'production')"),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True, comment="Expiry timestamp"),
        sa.Column("last_used_at", sa.DateTime(timezone=True), nullable=True, comment="When the key was last revealed"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_api_keys_service", "api_keys", ["service"])
    op.create_index("ix_api_keys_environment", "api_keys", ["environment"])


def downgrade() -> None:
    """Drop all catalog tables."""
    op.drop_index("ix_api_keys_environment", table_name="api_keys")
    op.drop_index("ix_api_keys_service", table_name="api_keys")
    op.drop_table("api_keys")

    op.drop_index("idx_request_history_created", table_name="request_history")
    op.drop_index("idx_request_history_user_created", table_name="request_history")
    op.drop_table("request_history")

    op.drop_index("idx_reviews_api_rating", table_name="reviews")
    op.drop_index("idx_reviews_api_created", table_name="reviews")
    op.drop_index("ix_reviews_user_id", table_name="reviews")
    op.drop_table("reviews")

    op.drop_index("idx_apis_featured_created", table_name="apis")
    op.drop_index("idx_apis_created_id", table_name="apis")
    op.drop_index("ix_apis_category", table_name="apis")
    op.drop_index("ix_apis_name", table_name="apis")
    op.drop_table("apis")

    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
