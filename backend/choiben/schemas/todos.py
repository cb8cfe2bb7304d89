from typing import List, Literal, Optional
from pydantic import BaseModel, Field

DEFAULT_SECTION_TITLE = "AI提案TODO"
DEFAULT_STUDY_TIME_HOURS = 1.0

class Priority:
    HIGH = 1
    MEDIUM = 2
    LOW = 3

class ParsedTask(BaseModel):
    task: str
    study_time_hours: float = DEFAULT_STUDY_TIME_HOURS
    section: Optional[str] = None
    goal: Optional[str] = None
    priority: Optional[Literal[1, 2, 3]] = None

class Section(BaseModel):
    title: str
    tasks: List[ParsedTask] = Field(default_factory=list)
    total_time_hours: float = 0.0

    def add(self, task: ParsedTask) -> None:
        # total_time_hours tracks the live sum of tasks
        self.tasks.append(task)
        self.total_time_hours += task.study_time_hours

class CreationRecord(BaseModel):
    task: str
    study_time_hours: float
    status: Literal["pending"] = "pending"

class ParseIn(BaseModel):
    content: str

class ParseOut(BaseModel):
    sections: List[Section]
    tasks: List[ParsedTask]
    records: List[CreationRecord]

class RecordsIn(BaseModel):
    content: str
    keys: Optional[List[str]] = None
