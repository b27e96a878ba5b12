from datetime import date

import pytest

from showtimes.dialog.types import ResolvedDate, ResolvedLocation
from showtimes.memory.models import DialogSession
from showtimes.tools.base import LookupFailure

pytestmark = pytest.mark.anyio

SATURDAY = ResolvedDate(date=date(2026, 10, 24), display_date="Saturday October 24th")
SEATTLE = ResolvedLocation(display_name="Seattle", location_key="98101")


async def test_one_shot_with_both_slots_finalizes_without_session_writes(resolver, lookup, session):
    response = await resolver.one_shot({"City": "Seattle", "Date": "Saturday"}, session)

    assert lookup.calls == [("98101", date(2026, 10, 24))]
    assert session.attributes == {}
    assert response.should_end_session is True
    assert response.speech.text == (
        "Saturday October 24th in Seattle, AMC Pacific Place 11 is showing Dune: Part Two and Wicked."
        " Regal Meridian 16 is showing Gladiator II."
    )
    assert response.card is not None
    assert response.card.title == "Fandango"


async def test_one_shot_defaults_location_and_date(resolver, lookup, session):
    response = await resolver.one_shot({}, session)

    assert lookup.calls == [("98101", date(2026, 10, 21))]
    assert response.speech.text.startswith("Wednesday October 21st in Seattle,")


async def test_one_shot_invalid_location_reprompts_without_session_writes(resolver, lookup):
    first_session = DialogSession(session_id="a")
    second_session = DialogSession(session_id="b")

    first = await resolver.one_shot({"City": "Atlantis", "Date": "Saturday"}, first_session)
    second = await resolver.one_shot({"City": "Atlantis", "Date": "Saturday"}, second_session)

    assert "Atlantis" in first.speech.text
    assert first.should_end_session is False
    assert first.reprompt is not None
    assert "Seattle" in first.reprompt.text
    assert first == second
    assert first_session.attributes == {} and second_session.attributes == {}
    assert lookup.calls == []


async def test_one_shot_bad_date_keeps_location_in_session(resolver, lookup, session):
    response = await resolver.one_shot({"City": "Chicago", "Date": "whenever"}, session)

    assert response.speech.text.startswith("I'm sorry, I didn't understand that date.")
    assert response.should_end_session is False
    assert session.location == ResolvedLocation(display_name="Chicago", location_key="60601")
    assert lookup.calls == []


async def test_one_shot_prefers_stored_location_over_default(resolver, lookup, session):
    session.store_location(ResolvedLocation(display_name="Chicago", location_key="60601"))

    await resolver.one_shot({"Date": "tomorrow"}, session)

    assert lookup.calls == [("60601", date(2026, 10, 22))]


async def test_multi_turn_location_then_date(resolver, lookup, session):
    first = await resolver.multi_turn({"City": "seattle"}, session)

    assert first.speech.text == "For which date?"
    assert first.reprompt.text == "For which date would you like movie information for seattle?"
    assert session.location == ResolvedLocation(display_name="seattle", location_key="98101")
    assert lookup.calls == []

    second = await resolver.multi_turn({"Date": "Saturday"}, session)

    assert lookup.calls == [("98101", date(2026, 10, 24))]
    assert second.should_end_session is True


async def test_multi_turn_date_before_location(resolver, lookup, session):
    first = await resolver.multi_turn({"Date": "Saturday"}, session)

    assert first.speech.text == "For which zipcode would you like movie information for Saturday October 24th?"
    assert session.date == SATURDAY

    await resolver.multi_turn({"Zipcode": "63101"}, session)

    assert lookup.calls == [("63101", date(2026, 10, 24))]


async def test_multi_turn_invalid_location_apologises(resolver, lookup, session):
    response = await resolver.multi_turn({"City": "Atlantis"}, session)

    assert response.speech.text.startswith("I'm sorry, I don't have any data for Atlantis.")
    assert session.attributes == {}
    assert lookup.calls == []


async def test_multi_turn_bad_date_asks_again(resolver, lookup, session):
    session.store_location(SEATTLE)

    response = await resolver.multi_turn({"Date": "whenever"}, session)

    assert "didn't understand that date" in response.speech.text
    assert session.date is None
    assert lookup.calls == []


async def test_multi_turn_location_wins_over_date(resolver, lookup, session):
    response = await resolver.multi_turn({"City": "Boston", "Date": "Saturday"}, session)

    assert response.speech.text == "For which date?"
    assert session.location.location_key == "02108"
    assert session.date is None


async def test_multi_turn_empty_turn_without_state_asks_for_zipcode(resolver, lookup, session):
    response = await resolver.multi_turn({"City": "", "Date": None}, session)

    assert "zipcode" in response.speech.text
    assert "day of the week" not in response.speech.text
    assert response.should_end_session is False
    assert session.attributes == {}


async def test_multi_turn_empty_turn_with_location_asks_for_date(resolver, session):
    session.store_location(SEATTLE)

    response = await resolver.multi_turn({}, session)

    assert "day of the week" in response.speech.text


async def test_lookup_failure_is_spoken(resolver, lookup, session):
    lookup.result = LookupFailure(message="Fandango is experiencing difficulties")

    response = await resolver.one_shot({"City": "Seattle", "Date": "today"}, session)

    assert response.speech.text == "Sorry, Fandango is experiencing difficulties."
    assert response.should_end_session is True
