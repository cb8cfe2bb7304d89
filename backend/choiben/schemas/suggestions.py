from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator
from .todos import Section

class SuggestionRequest(BaseModel):
    time_available: int = Field(ge=1, le=480)  # minutes
    recent_progress: Optional[str] = None
    weak_areas: Optional[List[str]] = None
    daily_goal: Optional[str] = None

class ScrapboxSuggestionRequest(BaseModel):
    time_available: int = Field(ge=15, le=480)
    daily_goal: str

    @field_validator("daily_goal")
    @classmethod
    def goal_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("今日の目標を入力してください")
        return v

class SuggestionResponse(BaseModel):
    success: bool
    content: str
    response_type: Literal["general", "scrapbox", "error"]

class ParsedSuggestion(SuggestionResponse):
    sections: List[Section] = Field(default_factory=list)
