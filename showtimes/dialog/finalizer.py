"""Issue the showtime lookup and phrase the final answer."""

from __future__ import annotations

import logging
from typing import Sequence

from showtimes.dialog.types import ResolvedDate, ResolvedLocation
from showtimes.skill.response import SkillResponse
from showtimes.tools.base import LookupFailure, ShowtimeLookup, TheaterListing

logger = logging.getLogger("showtimes.dialog")


def spoken_list(items: Sequence[str]) -> str:
    """Join items the way they are read aloud: "a, b, and c"."""

    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"


def _theater_sentence(listing: TheaterListing) -> str:
    if listing.movies:
        return f"{listing.name} is showing {spoken_list(listing.movies)}"
    return f"{listing.name} has no movies listed"


class Finalizer:
    """Both dialog paths end here once a location and a date are known."""

    def __init__(self, lookup: ShowtimeLookup, card_title: str) -> None:
        self.lookup = lookup
        self.card_title = card_title

    async def finalize(self, location: ResolvedLocation, date: ResolvedDate) -> SkillResponse:
        logger.info(
            "Looking up showtimes for %s (%s) on %s",
            location.display_name,
            location.location_key,
            date.date.isoformat(),
        )
        result = await self.lookup.lookup(location.location_key, date.date)

        if isinstance(result, LookupFailure):
            speech = f"Sorry, {result.message.rstrip('.')}."
        elif not result.listings:
            speech = f"Sorry, there are no results for {location.location_key}."
        else:
            first, *others = result.listings
            speech = f"{date.display_date} in {location.display_name}, {_theater_sentence(first)}."
            for listing in others:
                speech += f" {_theater_sentence(listing)}."

        return SkillResponse.tell_with_card(speech, self.card_title, speech)
