from datetime import date

import pytest

from showtimes.dialog.extract import extract_date, extract_location, has_date_value, has_location_value
from showtimes.dialog.types import InvalidLocation, MissingSlot, ResolvedDate, ResolvedLocation, UnparseableDate


@pytest.mark.parametrize("slots", [{}, {"City": None}, {"City": ""}, {"City": "   "}])
def test_missing_location_uses_default_when_allowed(slots, locations):
    outcome = extract_location(slots, locations, allow_default=True)

    assert outcome == ResolvedLocation(display_name="Seattle", location_key="98101")


@pytest.mark.parametrize("slots", [{}, {"City": None}, {"City": ""}])
def test_missing_location_without_default(slots, locations):
    assert extract_location(slots, locations, allow_default=False) == MissingSlot(slot="City")


@pytest.mark.parametrize("spoken", ["SEATTLE", "Seattle", "seattle", " seattle "])
def test_location_lookup_ignores_case(spoken, locations):
    outcome = extract_location({"City": spoken}, locations, allow_default=False)

    assert isinstance(outcome, ResolvedLocation)
    assert outcome.location_key == "98101"
    assert outcome.display_name == spoken.strip()


def test_zipcode_slot_is_a_location(locations):
    outcome = extract_location({"Zipcode": "63101"}, locations, allow_default=False)

    assert outcome == ResolvedLocation(display_name="63101", location_key="63101")


def test_unknown_location_keeps_original_text(locations):
    outcome = extract_location({"City": "Atlantis"}, locations, allow_default=True)

    assert outcome == InvalidLocation(raw_name="Atlantis")


def test_date_slot(today):
    outcome = extract_date({"Date": "Saturday"}, today)

    assert outcome == ResolvedDate(date=date(2026, 10, 24), display_date="Saturday October 24th")


def test_missing_date(today):
    assert extract_date({"Date": ""}, today) == MissingSlot(slot="Date")
    assert extract_date({}, today, default_today=True) == ResolvedDate(
        date=today, display_date="Wednesday October 21st"
    )


def test_unparseable_date(today):
    assert extract_date({"Date": "whenever"}, today) == UnparseableDate(raw_value="whenever")


def test_presence_checks():
    assert has_location_value({"Zipcode": "98101"})
    assert not has_location_value({"City": "", "Zipcode": None})
    assert has_date_value({"Date": "today"})
    assert not has_date_value({"Date": None})
