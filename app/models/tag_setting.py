from datetime import datetime
import enum

from sqlalchemy import Integer, String, DateTime, Enum, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class TagGoal(str, enum.Enum):
    more = "more"
    less = "less"
    none = "none"


class TagSetting(Base):
    """User intent for a tag, keyed by tag name."""

    __tablename__ = "tag_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    tag_name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    goal: Mapped[TagGoal] = mapped_column(
        Enum(TagGoal, name="tag_goal_enum"), nullable=False, default=TagGoal.none
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
