from .entry import Entry
from .wisdom import WisdomEntry, WisdomCategory
from .note import Note
from .tag_setting import TagSetting, TagGoal
from .prompt import DailyPrompt
from .user_settings import UserSettings

__all__ = [
    "Entry",
    "WisdomEntry",
    "WisdomCategory",
    "Note",
    "TagSetting",
    "TagGoal",
    "DailyPrompt",
    "UserSettings",
]
