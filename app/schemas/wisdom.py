"""
Wisdom collection schemas.

POST /wisdom         -> WisdomCreateRequest -> WisdomResponse
GET  /wisdom/random  -> list[WisdomResponse]
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.wisdom import WisdomCategory


class WisdomCreateRequest(BaseModel):
    content: Annotated[str, Field(min_length=1, max_length=5_000)]
    category: WisdomCategory = Field(examples=["quote"])
    source: Optional[str] = Field(default=None, max_length=256)
    author: Optional[str] = Field(default=None, max_length=256)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: str) -> str:
        stripped = v.strip() if isinstance(v, str) else v
        if not stripped:
            raise ValueError("content must not be empty after stripping whitespace")
        return stripped


class WisdomResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    category: WisdomCategory
    source: Optional[str] = None
    author: Optional[str] = None
    show_count: int
    last_shown_at: Optional[datetime] = None
    created_at: datetime
