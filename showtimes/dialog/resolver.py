"""Multi-turn slot-filling dialog for the showtime intents.

Two entry points share the same finalization step:

* ``one_shot`` handles "get movie information for Seattle on Saturday" in a
  single turn, defaulting whatever the user left out.
* ``multi_turn`` handles one slot per turn, keeping the answers given so far
  in the session until both a location and a date are known.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from showtimes.dialog import prompts
from showtimes.dialog.extract import (
    SlotValues,
    extract_date,
    extract_location,
    has_date_value,
    has_location_value,
)
from showtimes.dialog.finalizer import Finalizer
from showtimes.dialog.locations import LocationTable
from showtimes.dialog.types import InvalidLocation, MissingSlot, ResolvedDate, ResolvedLocation
from showtimes.memory.models import DialogSession
from showtimes.skill.response import SkillResponse

logger = logging.getLogger("showtimes.dialog")


class DialogResolver:
    """Decide whether to ask for a slot or finish the request."""

    def __init__(
        self,
        locations: LocationTable,
        finalizer: Finalizer,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.locations = locations
        self.finalizer = finalizer
        self._clock = clock

    async def one_shot(self, slots: SlotValues, session: DialogSession) -> SkillResponse:
        stored_location = session.location
        location = extract_location(slots, self.locations, allow_default=stored_location is None)
        if isinstance(location, MissingSlot):
            location = stored_location

        if not isinstance(location, ResolvedLocation):
            # Invalid location: hand over to the dialog without touching the session.
            raw_name = location.raw_name if isinstance(location, InvalidLocation) else None
            reprompt = prompts.supported_locations(self.locations)
            return SkillResponse.ask(prompts.unknown_location(raw_name, reprompt), reprompt)

        stored_date = session.date
        day = extract_date(slots, self._clock(), default_today=stored_date is None)
        if isinstance(day, MissingSlot):
            day = stored_date

        if not isinstance(day, ResolvedDate):
            session.store_location(location)
            return SkillResponse.ask(prompts.DATE_NOT_UNDERSTOOD, prompts.DATE_RETRY)

        return await self.finalizer.finalize(location, day)

    async def multi_turn(self, slots: SlotValues, session: DialogSession) -> SkillResponse:
        # With several slots in one intent we cannot be sure which one the
        # user answered; a location wins over a date.
        if has_location_value(slots):
            return await self._location_turn(slots, session)
        if has_date_value(slots):
            return await self._date_turn(slots, session)
        return self._empty_turn(session)

    async def _location_turn(self, slots: SlotValues, session: DialogSession) -> SkillResponse:
        location = extract_location(slots, self.locations, allow_default=False)
        if not isinstance(location, ResolvedLocation):
            raw_name = location.raw_name if isinstance(location, InvalidLocation) else None
            return SkillResponse.ask(prompts.unknown_location(raw_name, prompts.ZIP_INFO), prompts.ZIP_INFO)

        stored_date = session.date
        if stored_date is not None:
            return await self.finalizer.finalize(location, stored_date)

        session.store_location(location)
        return SkillResponse.ask(prompts.DATE_NEXT, prompts.date_for(location.display_name))

    async def _date_turn(self, slots: SlotValues, session: DialogSession) -> SkillResponse:
        day = extract_date(slots, self._clock())
        if not isinstance(day, ResolvedDate):
            return SkillResponse.ask(prompts.DATE_NOT_UNDERSTOOD, prompts.DATE_RETRY)

        stored_location = session.location
        if stored_location is not None:
            return await self.finalizer.finalize(stored_location, day)

        # Date given before a location.
        session.store_date(day)
        return SkillResponse.ask(prompts.zipcode_for(day.display_date), prompts.ZIP_NEXT)

    def _empty_turn(self, session: DialogSession) -> SkillResponse:
        logger.debug("No slot values in dialog turn for session %s", session.session_id)
        if session.location is not None:
            return SkillResponse.ask(prompts.DAY_OF_WEEK_RETRY, prompts.DAY_OF_WEEK_RETRY)
        return SkillResponse.ask(prompts.ZIP_INFO, prompts.WHICH_ZIP)
