import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Entry(Base):
    """One journal line for a calendar day.

    `tags` and `mentions` are derived from `content` once, when the entry
    is created, and are not kept in sync with later edits.
    """

    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    mood: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    prompt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_highlight: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_dream: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    mentions: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
