"""Fandango "movies near me" RSS lookup.

Results can be seen at http://www.fandango.com/rss/moviesnearme_<zipcode>.rss.
Each ``<item>`` is a theater; its HTML description lists the movies playing
there as ``<li>`` entries.
"""

from __future__ import annotations

import logging
from datetime import date

import httpx
from bs4 import BeautifulSoup

from showtimes.tools.base import LookupFailure, LookupResult, LookupSuccess, ShowtimeLookup, TheaterListing

SERVICE_DIFFICULTIES = "Fandango is experiencing difficulties"


class FandangoLookup(ShowtimeLookup):
    """Theaters and movies near a zipcode from the Fandango RSS feed."""

    def __init__(
        self,
        feed_url: str,
        *,
        timeout: float = 10.0,
        max_theaters: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.feed_url = feed_url
        self.timeout = timeout
        self.max_theaters = max(1, max_theaters)
        self._transport = transport
        self._logger = logging.getLogger("showtimes.fandango")

    async def lookup(self, location_key: str, day: date) -> LookupResult:
        # The feed has no date parameter; ``day`` only shapes the spoken answer.
        url = self.feed_url.format(zipcode=location_key)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            self._logger.warning("Communications error: %s", exc)
            return LookupFailure(message=str(exc) or SERVICE_DIFFICULTIES)

        self._logger.info("Status Code: %s", response.status_code)
        if not response.is_success:
            return LookupFailure(message=SERVICE_DIFFICULTIES)

        listings = parse_feed(response.content)
        if not listings:
            self._logger.info("Fandango error: no results for %s", location_key)
            return LookupFailure(message=f"there are no results for {location_key}")

        return LookupSuccess(listings=tuple(listings[: self.max_theaters]))


def parse_feed(document: str | bytes) -> list[TheaterListing]:
    """Return one listing per ``<item>`` in the feed."""

    soup = BeautifulSoup(document, "xml")
    listings: list[TheaterListing] = []

    for item in soup.find_all("item"):
        title = item.find("title")
        name = title.get_text(" ", strip=True) if title else ""

        movies: list[str] = []
        description = item.find("description")
        if description is not None:
            fragment = BeautifulSoup(description.get_text(), "html.parser")
            for entry in fragment.find_all("li"):
                text = entry.get_text(" ", strip=True)
                if text:
                    movies.append(text)

        listings.append(TheaterListing(name=name or "an unnamed theater", movies=tuple(movies)))

    return listings
