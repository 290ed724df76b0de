"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- ENUM types ---
    wisdom_category_enum = sa.Enum(
        "thought", "quote", "fact", "excerpt", "lesson", name="wisdom_category_enum"
    )
    wisdom_category_enum.create(op.get_bind(), checkfirst=True)

    tag_goal_enum = sa.Enum("more", "less", "none", name="tag_goal_enum")
    tag_goal_enum.create(op.get_bind(), checkfirst=True)

    # --- journal_entries ---
    op.create_table(
        "journal_entries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("mood", sa.Integer(), nullable=True),
        sa.Column("prompt", sa.Text(), nullable=True),
        sa.Column("is_highlight", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_dream", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("mentions", sa.JSON(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_journal_entries_id", "journal_entries", ["id"])
    op.create_index("ix_journal_entries_date", "journal_entries", ["date"])

    # --- wisdom_entries ---
    op.create_table(
        "wisdom_entries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.Enum(
            "thought", "quote", "fact", "excerpt", "lesson",
            name="wisdom_category_enum", create_type=False,
        ), nullable=False),
        sa.Column("source", sa.String(256), nullable=True),
        sa.Column("author", sa.String(256), nullable=True),
        sa.Column("show_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_shown_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_wisdom_entries_id", "wisdom_entries", ["id"])
    op.create_index("ix_wisdom_entries_category", "wisdom_entries", ["category"])

    # --- notes ---
    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("labels", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notes_id", "notes", ["id"])

    # --- tag_settings ---
    op.create_table(
        "tag_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tag_name", sa.String(128), nullable=False),
        sa.Column("goal", sa.Enum(
            "more", "less", "none", name="tag_goal_enum", create_type=False,
        ), nullable=False, server_default="none"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tag_settings_id", "tag_settings", ["id"])
    op.create_index("ix_tag_settings_tag_name", "tag_settings", ["tag_name"], unique=True)

    # --- daily_prompts ---
    op.create_table(
        "daily_prompts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_daily_prompts_id", "daily_prompts", ["id"])

    # --- user_settings ---
    op.create_table(
        "user_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("reminder_time", sa.String(5), nullable=True),
        sa.Column("daily_goal", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("theme", sa.String(16), nullable=False, server_default="light"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("user_settings")
    op.drop_table("daily_prompts")
    op.drop_table("tag_settings")
    op.drop_table("notes")
    op.drop_table("wisdom_entries")
    op.drop_table("journal_entries")

    op.execute("DROP TYPE IF EXISTS tag_goal_enum")
    op.execute("DROP TYPE IF EXISTS wisdom_category_enum")
