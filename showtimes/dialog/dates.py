"""Spoken date parsing and speech-friendly date formatting.

Handles the values the host's date slot produces (ISO dates and ISO weeks)
as well as the loose phrases people say when the slot is filled verbatim:
"today", "tomorrow", "saturday", "this friday", "next sunday", "june 20th".
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta

from dateutil import parser

WEEKDAYS = {name.lower(): index for index, name in enumerate(calendar.day_name)}

EXPLICIT_YEAR = re.compile(r"\b\d{4}\b")

ISO_WEEK = re.compile(r"^(\d{4})-W(\d{1,2})(-WE)?$", re.IGNORECASE)

_FILLER_PREFIXES = ("on ", "this ", "coming ", "this coming ")


def parse_spoken_date(text: str, today: date) -> date | None:
    """Return the calendar date ``text`` refers to, or ``None``."""

    phrase = " ".join(text.lower().split())
    if not phrase:
        return None

    week_match = ISO_WEEK.match(phrase)
    if week_match:
        year, week, weekend = week_match.groups()
        try:
            monday = date.fromisocalendar(int(year), int(week), 1)
        except ValueError:
            return None
        return monday + timedelta(days=5) if weekend else monday

    if phrase in {"today", "tonight", "now"}:
        return today
    if phrase == "tomorrow":
        return today + timedelta(days=1)

    upcoming = False
    if phrase.startswith("next "):
        upcoming = True
        phrase = phrase[len("next "):]
    else:
        for prefix in sorted(_FILLER_PREFIXES, key=len, reverse=True):
            if phrase.startswith(prefix):
                phrase = phrase[len(prefix):]
                break

    if phrase in WEEKDAYS:
        days_ahead = (WEEKDAYS[phrase] - today.weekday()) % 7
        if upcoming and days_ahead == 0:
            days_ahead = 7
        return today + timedelta(days=days_ahead)

    default = datetime(today.year, today.month, today.day)
    try:
        parsed = parser.parse(phrase, default=default).date()
    except (ValueError, OverflowError):
        return None

    # "june 20th" means the next June 20th, never one already gone by.
    if parsed < today and not EXPLICIT_YEAR.search(phrase):
        try:
            parsed = parsed.replace(year=parsed.year + 1)
        except ValueError:
            pass
    return parsed


def ordinal(day: int) -> str:
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def display_date(day: date) -> str:
    """Format ``day`` for speech, e.g. ``Saturday June 20th``."""

    return f"{day:%A} {day:%B} {ordinal(day.day)}"
