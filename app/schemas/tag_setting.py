from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.tag_setting import TagGoal


def normalize_tag_name(value: str) -> str:
    # Stored tags are lowercase without the leading '#'.
    return value.strip().lstrip("#").lower()


class TagSettingRequest(BaseModel):
    tag_name: Annotated[str, Field(min_length=1, max_length=128, examples=["work"])]
    goal: TagGoal = TagGoal.none

    @field_validator("tag_name", mode="before")
    @classmethod
    def normalize_tag(cls, v: str) -> str:
        return normalize_tag_name(v) if isinstance(v, str) else v


class TagSettingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    tag_name: str
    goal: TagGoal
