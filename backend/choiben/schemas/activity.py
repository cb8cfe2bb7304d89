import datetime as dt
from typing import List, Literal, Optional
from pydantic import BaseModel

class ActivityDay(BaseModel):
    date: Optional[dt.date]  # None for padding cells
    count: int = 0
    level: Literal[0, 1, 2, 3, 4] = 0

class Heatmap(BaseModel):
    start: dt.date
    end: dt.date
    days: List[ActivityDay]
    total: int
    streak: int

class HeatmapIn(BaseModel):
    completed_at: List[str]
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None
