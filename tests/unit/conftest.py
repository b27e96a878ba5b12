"""Pytest unit test fixtures."""

from datetime import date

import pytest

from showtimes.dialog.finalizer import Finalizer
from showtimes.dialog.locations import build_location_table
from showtimes.dialog.resolver import DialogResolver
from showtimes.memory.models import DialogSession
from showtimes.tools.base import LookupSuccess, ShowtimeLookup, TheaterListing

# A Wednesday.
TODAY = date(2026, 10, 21)


class RecordingLookup(ShowtimeLookup):
    """Returns a canned result and remembers every call."""

    def __init__(self, result=None):
        self.result = result or LookupSuccess(
            listings=(
                TheaterListing(name="AMC Pacific Place 11", movies=("Dune: Part Two", "Wicked")),
                TheaterListing(name="Regal Meridian 16", movies=("Gladiator II",)),
            )
        )
        self.calls = []

    async def lookup(self, location_key, day):
        self.calls.append((location_key, day))
        return self.result


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def locations():
    return build_location_table("Seattle")


@pytest.fixture
def lookup():
    return RecordingLookup()


@pytest.fixture
def resolver(locations, lookup):
    finalizer = Finalizer(lookup, card_title="Fandango")
    return DialogResolver(locations, finalizer, clock=lambda: TODAY)


@pytest.fixture
def session():
    return DialogSession(session_id="session-1")
