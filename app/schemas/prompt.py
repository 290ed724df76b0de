"""
Writing prompt and preference schemas.

GET   /prompts/random -> PromptResponse | null
GET   /settings       -> SettingsResponse
PATCH /settings       -> SettingsUpdateRequest -> SettingsResponse
"""
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PromptResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    category: str


class SettingsUpdateRequest(BaseModel):
    reminder_time: Optional[Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]] = Field(
        default=None, description="Daily reminder as HH:MM.", examples=["21:30"],
    )
    daily_goal: Optional[Annotated[int, Field(ge=1, le=50)]] = None
    theme: Optional[Literal["light", "dark"]] = None


class SettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reminder_time: Optional[str] = None
    daily_goal: int = 1
    theme: str = "light"
