"""Turn raw slot values into typed location and date outcomes."""

from __future__ import annotations

from datetime import date
from typing import Mapping

from showtimes.dialog.dates import display_date, parse_spoken_date
from showtimes.dialog.locations import LocationTable
from showtimes.dialog.types import (
    DateOutcome,
    InvalidLocation,
    LocationOutcome,
    MissingSlot,
    ResolvedDate,
    ResolvedLocation,
    UnparseableDate,
)

LOCATION_SLOTS = ("City", "Zipcode")
DATE_SLOT = "Date"

SlotValues = Mapping[str, str | None]


def _slot_text(slots: SlotValues, name: str) -> str | None:
    value = slots.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _location_text(slots: SlotValues) -> str | None:
    for name in LOCATION_SLOTS:
        text = _slot_text(slots, name)
        if text:
            return text
    return None


def has_location_value(slots: SlotValues) -> bool:
    return _location_text(slots) is not None


def has_date_value(slots: SlotValues) -> bool:
    return _slot_text(slots, DATE_SLOT) is not None


def extract_location(
    slots: SlotValues,
    table: LocationTable,
    allow_default: bool,
) -> LocationOutcome:
    """Resolve the City/Zipcode slot against the location table."""

    text = _location_text(slots)
    if text is None:
        if not allow_default:
            return MissingSlot(slot=LOCATION_SLOTS[0])
        return ResolvedLocation(display_name=table.default_name, location_key=table.default_key)

    key = table.lookup(text)
    if key is None:
        return InvalidLocation(raw_name=text)
    return ResolvedLocation(display_name=text, location_key=key)


def extract_date(
    slots: SlotValues,
    today: date,
    default_today: bool = False,
) -> DateOutcome:
    """Resolve the Date slot relative to ``today``."""

    text = _slot_text(slots, DATE_SLOT)
    if text is None:
        if default_today:
            return ResolvedDate(date=today, display_date=display_date(today))
        return MissingSlot(slot=DATE_SLOT)

    day = parse_spoken_date(text, today)
    if day is None:
        return UnparseableDate(raw_value=text)
    return ResolvedDate(date=day, display_date=display_date(day))
