"""Daily TODO-completion heatmap, GitHub contribution style."""

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Optional

from dateutil import parser as dtparser

from ..schemas.activity import ActivityDay, Heatmap

logger = logging.getLogger(__name__)

DEFAULT_SPAN_DAYS = 365
MAX_SPAN_DAYS = 366 * 10

def activity_level(count: int, max_count: int) -> int:
    if count <= 0:
        return 0
    ratio = count / max_count
    if ratio >= 0.75:
        return 4
    if ratio >= 0.5:
        return 3
    if ratio >= 0.25:
        return 2
    return 1

def _completion_dates(completed_at: Iterable[str]) -> List[date]:
    dates = []
    for ts in completed_at:
        try:
            dates.append(dtparser.isoparse(ts).date())
        except (ValueError, OverflowError):
            logger.warning("skipping unparseable completion timestamp %r", ts)
    return dates

def current_streak(days: List[ActivityDay]) -> int:
    streak = 0
    for day in reversed(days):
        if day.count == 0:
            break
        streak += 1
    return streak

def build_heatmap(
    completed_at: Iterable[str],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> Heatmap:
    """Count completions per day over the inclusive range start..end.

    Levels 1-4 are assigned by each day's share of the busiest day's count.
    """
    end = end or date.today()
    if start is None:
        try:
            start = end - timedelta(days=DEFAULT_SPAN_DAYS)
        except OverflowError:
            raise ValueError("end is too early for the default range") from None
    if start > end:
        raise ValueError("start must not be after end")
    span = (end - start).days + 1
    if span > MAX_SPAN_DAYS:
        raise ValueError(f"range must not exceed {MAX_SPAN_DAYS} days")

    counts = Counter(d for d in _completion_dates(completed_at) if start <= d <= end)
    max_count = max(counts.values(), default=0) or 1
    days = []
    for offset in range(span):
        d = start + timedelta(days=offset)
        days.append(ActivityDay(date=d, count=counts[d], level=activity_level(counts[d], max_count)))
    return Heatmap(
        start=start,
        end=end,
        days=days,
        total=sum(counts.values()),
        streak=current_streak(days),
    )

def group_weeks(days: List[ActivityDay]) -> List[List[ActivityDay]]:
    """Lay days out in Sunday-first weeks, padding both ends with empty cells."""
    weeks: List[List[ActivityDay]] = []
    week: List[ActivityDay] = []
    for i, day in enumerate(days):
        weekday = (day.date.weekday() + 1) % 7  # Sunday == 0
        if i == 0:
            week.extend(ActivityDay(date=None) for _ in range(weekday))
        week.append(day)
        if weekday == 6 or i == len(days) - 1:
            week.extend(ActivityDay(date=None) for _ in range(7 - len(week)))
            weeks.append(week)
            week = []
    return weeks
