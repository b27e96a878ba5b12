"""Conversation-scoped dialog state carried in host session attributes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from showtimes.dialog.types import ResolvedDate, ResolvedLocation

LOCATION_ATTRIBUTE = "city"
DATE_ATTRIBUTE = "date"


@dataclass(slots=True)
class DialogSession:
    """Session attributes for one conversation.

    The host hands the attributes in with every turn and stores whatever is
    returned in ``sessionAttributes``. Only the ``city`` and ``date`` keys
    are interpreted here; once written they are never removed.
    """

    session_id: str
    attributes: dict[str, Any] = field(default_factory=dict)
    new: bool = False
    application_id: str | None = None
    user_id: str | None = None

    @property
    def location(self) -> ResolvedLocation | None:
        stored = self.attributes.get(LOCATION_ATTRIBUTE)
        if not isinstance(stored, dict):
            return None
        city = stored.get("city")
        zipcode = stored.get("zipcode")
        if not city or not zipcode:
            return None
        return ResolvedLocation(display_name=str(city), location_key=str(zipcode))

    def store_location(self, location: ResolvedLocation) -> None:
        self.attributes[LOCATION_ATTRIBUTE] = {
            "city": location.display_name,
            "zipcode": location.location_key,
        }

    @property
    def date(self) -> ResolvedDate | None:
        stored = self.attributes.get(DATE_ATTRIBUTE)
        if not isinstance(stored, dict):
            return None
        try:
            day = date.fromisoformat(str(stored.get("date")))
        except ValueError:
            return None
        display = stored.get("displayDate")
        if not display:
            return None
        return ResolvedDate(date=day, display_date=str(display))

    def store_date(self, resolved: ResolvedDate) -> None:
        self.attributes[DATE_ATTRIBUTE] = {
            "date": resolved.date.isoformat(),
            "displayDate": resolved.display_date,
        }
