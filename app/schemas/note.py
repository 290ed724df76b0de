from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteCreateRequest(BaseModel):
    title: Annotated[str, Field(min_length=1, max_length=256)]
    content: str
    labels: list[str] = Field(default_factory=list)


class NoteUpdateRequest(BaseModel):
    """Only the fields present in the body are changed."""
    title: Optional[Annotated[str, Field(min_length=1, max_length=256)]] = None
    content: Optional[str] = None
    labels: Optional[list[str]] = None


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    labels: list[str]
    created_at: datetime
    updated_at: datetime
