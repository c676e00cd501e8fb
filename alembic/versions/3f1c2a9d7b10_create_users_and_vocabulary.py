"""create users and vocabulary tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-09-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("profile_pic", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "vocabulary",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("word", sa.String(length=100), nullable=False),
        sa.Column("translation", sa.String(length=255), nullable=False),
        sa.Column("example", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("language", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_vocabulary_user_id", "vocabulary", ["user_id"])
    op.create_index("ix_vocabulary_word", "vocabulary", ["word"])
    op.create_index("ix_vocabulary_translation", "vocabulary", ["translation"])
    op.create_index("ix_vocabulary_created_at", "vocabulary", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_vocabulary_created_at", table_name="vocabulary")
    op.drop_index("ix_vocabulary_translation", table_name="vocabulary")
    op.drop_index("ix_vocabulary_word", table_name="vocabulary")
    op.drop_index("ix_vocabulary_user_id", table_name="vocabulary")
    op.drop_table("vocabulary")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
