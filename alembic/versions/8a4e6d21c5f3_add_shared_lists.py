"""add shared lists, collaborators and shared words

Revision ID: 8a4e6d21c5f3
Revises: 3f1c2a9d7b10
Create Date: 2026-09-16 14:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8a4e6d21c5f3"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "shared_lists",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_shared_lists_owner_id", "shared_lists", ["owner_id"])
    op.create_index("ix_shared_lists_updated_at", "shared_lists", ["updated_at"])

    op.create_table(
        "shared_list_collaborators",
        sa.Column("list_id", sa.Integer(), sa.ForeignKey("shared_lists.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.UniqueConstraint("list_id", "user_id", name="uq_shared_list_collaborators_list_user"),
    )
    op.create_index("ix_shared_list_collaborators_list_id", "shared_list_collaborators", ["list_id"])
    op.create_index("ix_shared_list_collaborators_user_id", "shared_list_collaborators", ["user_id"])

    op.create_table(
        "shared_list_words",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("list_id", sa.Integer(), sa.ForeignKey("shared_lists.id", ondelete="CASCADE"), nullable=False),
        sa.Column("word", sa.String(length=100), nullable=False),
        sa.Column("translation", sa.String(length=255), nullable=False),
        sa.Column("example", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("language", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("contributor_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_shared_list_words_list_id", "shared_list_words", ["list_id"])
    op.create_index("ix_shared_list_words_contributor_id", "shared_list_words", ["contributor_id"])


def downgrade() -> None:
    op.drop_index("ix_shared_list_words_contributor_id", table_name="shared_list_words")
    op.drop_index("ix_shared_list_words_list_id", table_name="shared_list_words")
    op.drop_table("shared_list_words")
    op.drop_index("ix_shared_list_collaborators_user_id", table_name="shared_list_collaborators")
    op.drop_index("ix_shared_list_collaborators_list_id", table_name="shared_list_collaborators")
    op.drop_table("shared_list_collaborators")
    op.drop_index("ix_shared_lists_updated_at", table_name="shared_lists")
    op.drop_index("ix_shared_lists_owner_id", table_name="shared_lists")
    op.drop_table("shared_lists")
