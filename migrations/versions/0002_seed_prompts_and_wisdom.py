"""seed writing prompts and starter wisdom

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-18

Inserts the default prompt catalogue and a starter wisdom collection.
Downgrade removes only the seeded rows.
"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


DEFAULT_PROMPTS = [
    ("What are three things you're grateful for today?", "Gratitude"),
    ("Who made a positive impact on your life recently?", "Gratitude"),
    ("What small moment brought you joy today?", "Gratitude"),
    ("What challenged you today and how did you handle it?", "Reflection"),
    ("What would you tell your younger self?", "Reflection"),
    ("What's something you learned recently that changed your perspective?", "Reflection"),
    ("What habit would you like to build or break?", "Growth"),
    ("What's one step you can take today toward a goal?", "Growth"),
    ("How have you grown in the last year?", "Growth"),
    ("How are you feeling right now, without judgment?", "Mindfulness"),
    ("What does your ideal day look like?", "Mindfulness"),
    ("What sounds, smells, or textures did you notice today?", "Mindfulness"),
    ("If you could live anywhere for a year, where and why?", "Creativity"),
    ("Describe a memory that always makes you smile.", "Creativity"),
    ("What would you create if you had unlimited resources?", "Creativity"),
]

# (content, category, source, author)
STARTER_WISDOM = [
    ("be as diverse in everything in your life as possible", "thought", None, None),
    ("the best time to plant a tree was 20 years ago. the second best time is now",
     "quote", None, "chinese proverb"),
    ("done is better than perfect", "thought", None, None),
    ("consistency compounds faster than intensity", "lesson", None, None),
    ("read more books than tweets", "thought", None, None),
    ("the obstacle is the way", "excerpt", "The Obstacle Is The Way", "ryan holiday"),
]


prompts_table = sa.table(
    "daily_prompts",
    sa.column("text", sa.Text),
    sa.column("category", sa.String),
)

wisdom_table = sa.table(
    "wisdom_entries",
    sa.column("content", sa.Text),
    sa.column("category", sa.String),
    sa.column("source", sa.String),
    sa.column("author", sa.String),
    sa.column("show_count", sa.Integer),
)


def upgrade() -> None:
    op.bulk_insert(
        prompts_table,
        [{"text": text, "category": category} for text, category in DEFAULT_PROMPTS],
    )
    op.bulk_insert(
        wisdom_table,
        [
            {"content": c, "category": cat, "source": s, "author": a, "show_count": 0}
            for c, cat, s, a in STARTER_WISDOM
        ],
    )


def downgrade() -> None:
    bind = op.get_bind()
    bind.execute(
        prompts_table.delete().where(prompts_table.c.text.in_([t for t, _ in DEFAULT_PROMPTS]))
    )
    bind.execute(
        wisdom_table.delete().where(wisdom_table.c.content.in_([c for c, *_ in STARTER_WISDOM]))
    )
