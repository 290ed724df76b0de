from datetime import datetime
from typing import Optional
import enum

from sqlalchemy import Integer, String, Text, DateTime, Enum, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class WisdomCategory(str, enum.Enum):
    thought = "thought"
    quote = "quote"
    fact = "fact"
    excerpt = "excerpt"
    lesson = "lesson"


class WisdomEntry(Base):
    __tablename__ = "wisdom_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[WisdomCategory] = mapped_column(
        Enum(WisdomCategory, name="wisdom_category_enum"), nullable=False, index=True
    )
    source: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    author: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    # Random selection weight is 1 / (show_count + 1).
    show_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_shown_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
