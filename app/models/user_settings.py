from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class UserSettings(Base):
    """Single-row table holding journal preferences."""

    __tablename__ = "user_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    reminder_time: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    daily_goal: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    theme: Mapped[str] = mapped_column(String(16), nullable=False, default="light")
