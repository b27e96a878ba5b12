"""Types for the external showtime lookup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class TheaterListing:
    """One theater from the feed and the movies it is showing."""

    name: str
    movies: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class LookupSuccess:
    listings: tuple[TheaterListing, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class LookupFailure:
    """Lookup failed; ``message`` is read to the user verbatim."""

    message: str


LookupResult = LookupSuccess | LookupFailure


class ShowtimeLookup(ABC):
    """Fetches showtimes for a location key."""

    @abstractmethod
    async def lookup(self, location_key: str, day: date) -> LookupResult:
        """Return theaters showing movies near ``location_key`` on ``day``."""
