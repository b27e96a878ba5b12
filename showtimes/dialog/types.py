"""Slot extraction outcomes shared by the dialog components."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ResolvedLocation:
    """A location found in the static table."""

    display_name: str
    location_key: str


@dataclass(frozen=True, slots=True)
class InvalidLocation:
    """The user named a location we have no data for."""

    raw_name: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedDate:
    """A concrete calendar date plus the text used to speak it."""

    date: date
    display_date: str


@dataclass(frozen=True, slots=True)
class UnparseableDate:
    raw_value: str


@dataclass(frozen=True, slots=True)
class MissingSlot:
    """The slot was absent from the turn or carried no value."""

    slot: str


LocationOutcome = ResolvedLocation | InvalidLocation | MissingSlot
DateOutcome = ResolvedDate | UnparseableDate | MissingSlot
