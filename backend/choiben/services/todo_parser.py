"""Parse AI-generated markdown TODO text into sections of study tasks.

The text is handled line by line: headings open a new section, every other
line is a task candidate whose duration, priority and goal markers are
extracted and removed from the task description.
"""

import enum
import logging
import math
import re
from typing import Any, Iterable, List, NamedTuple, Optional

from ..schemas.todos import (
    DEFAULT_SECTION_TITLE,
    DEFAULT_STUDY_TIME_HOURS,
    CreationRecord,
    ParsedTask,
    Priority,
    Section,
)

logger = logging.getLogger(__name__)

LIST_MARKER = re.compile(r"^\s*(?:[-•*]|\d+\.(?!\d))\s*")
DURATION = re.compile(
    r"(\d+(?:\.\d+)?)(分|時間|hours?(?![A-Za-z])|h(?![A-Za-z]))",
    re.IGNORECASE,
)
PRIORITY = re.compile(r"優先度[：:]\s*(高|中|低|1|2|3)")
GOAL = re.compile(r"目標[：:]\s*([^、。]+)")
TASK_KEY = re.compile(r"(\d+)-(\d+)", re.ASCII)

PRIORITY_VALUES = {
    "高": Priority.HIGH, "1": Priority.HIGH,
    "中": Priority.MEDIUM, "2": Priority.MEDIUM,
    "低": Priority.LOW, "3": Priority.LOW,
}

class LineKind(enum.Enum):
    HEADING = "heading"
    LIST_ITEM = "list_item"
    PLAIN = "plain"

class Line(NamedTuple):
    kind: LineKind
    text: str

class Extracted(NamedTuple):
    value: Optional[Any]
    remainder: str

def classify_line(line: str) -> Line:
    if line.startswith("#"):
        return Line(LineKind.HEADING, line.lstrip("#").strip())
    if LIST_MARKER.match(line):
        return Line(LineKind.LIST_ITEM, line)
    return Line(LineKind.PLAIN, line)

def _cut(text: str, match: re.Match) -> str:
    return text[:match.start()] + text[match.end():]

def extract_duration(text: str) -> Extracted:
    """Pull the first `<number><unit>` marker out of text, in hours.

    Minutes (分) are divided by 60; 時間, h and hour(s) pass through. Only the
    first marker is removed, later ones stay in the text.
    """
    m = DURATION.search(text)
    if not m:
        return Extracted(None, text)
    value = float(m.group(1))
    if m.group(2) == "分":
        value /= 60
    if not math.isfinite(value):
        value = DEFAULT_STUDY_TIME_HOURS
    return Extracted(value, _cut(text, m))

def extract_priority(text: str) -> Extracted:
    m = PRIORITY.search(text)
    if not m:
        return Extracted(None, text)
    return Extracted(PRIORITY_VALUES[m.group(1)], _cut(text, m))

def extract_goal(text: str) -> Extracted:
    """Goal text runs from the 目標 label up to the next 、 or 。"""
    m = GOAL.search(text)
    if not m:
        return Extracted(None, text)
    goal = m.group(1).strip() or None
    return Extracted(goal, _cut(text, m))

def extract_task(line: str) -> Optional[ParsedTask]:
    text = LIST_MARKER.sub("", line, count=1).strip()
    hours, text = extract_duration(text)
    priority, text = extract_priority(text)
    goal, text = extract_goal(text)
    text = text.strip()
    if not text:
        return None
    return ParsedTask(
        task=text,
        study_time_hours=DEFAULT_STUDY_TIME_HOURS if hours is None else hours,
        goal=goal,
        priority=priority,
    )

def parse(content: str) -> List[Section]:
    """Group the task lines of content under their headings.

    Tasks found before any heading go to a DEFAULT_SECTION_TITLE section,
    created at the position of the first such task. Lines that yield no task
    are skipped; this never raises.
    """
    sections: List[Section] = []
    current: Optional[Section] = None
    lines = [l.strip() for l in content.splitlines()]
    for line in filter(None, lines):
        kind, text = classify_line(line)
        if kind is LineKind.HEADING:
            current = Section(title=text)
            sections.append(current)
            continue
        task = extract_task(text)
        if task is None:
            continue
        if current is None:
            current = Section(title=DEFAULT_SECTION_TITLE)
            sections.append(current)
        current.add(task)
    logger.debug(
        "parsed %d sections with %d tasks",
        len(sections), sum(len(s.tasks) for s in sections),
    )
    return sections

def flatten(sections: Iterable[Section]) -> List[ParsedTask]:
    return [
        task.model_copy(update={"section": section.title})
        for section in sections
        for task in section.tasks
    ]

def adapt(task: ParsedTask) -> CreationRecord:
    text = task.task
    if task.section:
        text = f"[{task.section}] {text}"
    if task.goal:
        text = f"{text} (目標: {task.goal})"
    return CreationRecord(task=text, study_time_hours=task.study_time_hours)

def task_key(section_index: int, task_index: int) -> str:
    return f"{section_index}-{task_index}"

def all_keys(sections: List[Section]) -> List[str]:
    return [
        task_key(i, j)
        for i, section in enumerate(sections)
        for j in range(len(section.tasks))
    ]

def select(sections: List[Section], keys: Iterable[str]) -> List[ParsedTask]:
    """Return the tasks named by `<section>-<task>` keys, in key order.

    Keys that are malformed or point past the parsed sections are ignored.
    """
    selected = []
    for key in keys:
        m = TASK_KEY.fullmatch(key)
        if not m:
            logger.debug("ignoring malformed task key %r", key)
            continue
        i, j = int(m.group(1)), int(m.group(2))
        if i >= len(sections) or j >= len(sections[i].tasks):
            logger.debug("ignoring unknown task key %r", key)
            continue
        selected.append(sections[i].tasks[j].model_copy(update={"section": sections[i].title}))
    return selected

def to_creation_records(content: str, keys: Optional[Iterable[str]] = None) -> List[CreationRecord]:
    sections = parse(content)
    tasks = flatten(sections) if keys is None else select(sections, keys)
    return [adapt(t) for t in tasks]
