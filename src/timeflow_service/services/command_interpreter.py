"""Deterministic interpreter for natural-language scheduling commands.

Turns a free-text utterance such as "Meeting tomorrow at 3pm" into a
ScheduleDraft with a title, a calendar date and a one-hour time slot.

The interpreter is a pure function: the same text and reference instant
always produce the same draft. It never raises for odd input; anything it
cannot recognize falls back to defaults (today, 09:00-10:00, "New Task").
Only empty or whitespace-only text yields no draft at all.
"""

import logging
import re
from datetime import date, datetime, timedelta

from ..models.schedule import ScheduleDraft

logger = logging.getLogger(__name__)

AI_COLOR_TAG = "bg-indigo-500"
AI_NOTE = "Scheduled via AI Command Center"
DEFAULT_TITLE = "New Task"
DEFAULT_START = "09:00"
DEFAULT_END = "10:00"

NO_MATCH_MESSAGE = "Couldn't understand the command. Try 'Meeting tomorrow at 3pm'"

# Sunday first; when several names appear the last one in this order wins
WEEKDAY_NAMES = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]

# Python's date.weekday(): Monday == 0
_WEEKDAY_INDEX = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

# Hour 0-23 and minutes 00-59 only; digits inside longer numbers are not times.
# A clock with out-of-range minutes ("3:75pm") or hour ("24:00") is not a time at all.
_TIME_RE = re.compile(
    r"(?<![\d:])(?P<hour>[01]?\d|2[0-3])(?::(?P<minute>[0-5]\d))?(?!\d)(?!:\d)"
    r"\s*(?P<meridiem>(?:a|p)\.?m\.?(?![a-z]))?",
    re.IGNORECASE,
)
_RELATIVE_DAY_RE = re.compile(r"tomorrow|today|next week", re.IGNORECASE)
_WEEKDAY_RE = re.compile("|".join(WEEKDAY_NAMES), re.IGNORECASE)
_PREPOSITION_RE = re.compile(r"\bat\b|\bon\b", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def _resolve_date(lower: str, today: date) -> date:
    """Resolve relative date cues against today's date."""
    target = today
    if "tomorrow" in lower:
        target = today + timedelta(days=1)
    elif "next week" in lower:
        target = today + timedelta(days=7)

    # Weekday names are checked last and override tomorrow/next week
    for name in WEEKDAY_NAMES:
        if name in lower:
            diff = (_WEEKDAY_INDEX[name] - today.weekday()) % 7
            target = today + timedelta(days=diff or 7)

    return target


def _resolve_time(match: re.Match | None) -> tuple[str, str]:
    """Convert a clock-time match into (start, end) strings one hour apart."""
    if match is None:
        return DEFAULT_START, DEFAULT_END

    hour = int(match.group("hour"))
    minute = match.group("minute") or "00"
    meridiem = (match.group("meridiem") or "").lower()

    if meridiem.startswith("p") and 1 <= hour <= 11:
        hour += 12
    elif meridiem.startswith("a") and hour == 12:
        hour = 0

    end_hour = (hour + 1) % 24
    return f"{hour:02d}:{minute}", f"{end_hour:02d}:{minute}"


def _extract_title(text: str, match: re.Match | None) -> str:
    """Strip date and time expressions from the command, leaving the title."""
    title = text
    if match is not None:
        title = title[: match.start()] + title[match.end():]
    title = _RELATIVE_DAY_RE.sub("", title)
    title = _WEEKDAY_RE.sub("", title)
    title = _PREPOSITION_RE.sub("", title)
    title = _WHITESPACE_RE.sub(" ", title).strip()
    return title or DEFAULT_TITLE


def interpret(text: str, now: datetime | None = None) -> ScheduleDraft | None:
    """
    Interpret a scheduling command.

    Args:
        text: Typed command or finalized voice transcript
        now: Reference instant in the user's local calendar (default: system local time)

    Returns:
        ScheduleDraft, or None when the text is empty or blank
    """
    if not text or not text.strip():
        return None

    now = now or datetime.now()
    match = _TIME_RE.search(text)
    start_time, end_time = _resolve_time(match)

    draft = ScheduleDraft(
        title=_extract_title(text, match),
        date=_resolve_date(text.lower(), now.date()).isoformat(),
        start_time=start_time,
        end_time=end_time,
        color_tag=AI_COLOR_TAG,
        note=AI_NOTE,
    )

    logger.debug(f"Interpreted {text!r} as {draft.title!r} on {draft.date} {draft.start_time}-{draft.end_time}")

    return draft


def format_confirmation(draft: ScheduleDraft) -> str:
    """Build the confirmation message shown after a draft is scheduled."""
    return f"Scheduled: {draft.title} at {draft.start_time}"
