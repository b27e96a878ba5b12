"""Fixed speech used by the skill."""

from __future__ import annotations

from showtimes.dialog.locations import LocationTable

WHICH_ZIP = "Which zipcode would you like movie information for?"
HELP = (
    "I can lead you through providing a zipcode "
    "to get movie information, "
    "or you can simply open Fandango and ask a question like, "
    "get movie information for 63101. "
    "Or you can say exit. " + WHICH_ZIP
)
ZIP_INFO = "Currently, I know movie information by zipcode. " + WHICH_ZIP
WELCOME = "<speak>Welcome to Fandango. " + WHICH_ZIP + "</speak>"

DATE_RETRY = (
    "Please try again saying a day of the week, for example, Saturday. "
    "For which date would you like movie information?"
)
DATE_NOT_UNDERSTOOD = "I'm sorry, I didn't understand that date. " + DATE_RETRY
DATE_NEXT = "For which date?"
ZIP_NEXT = "For which zipcode?"
DAY_OF_WEEK_RETRY = "Please try again saying a day of the week, for example, Saturday. "

GOODBYE = "Goodbye"


def supported_locations(table: LocationTable) -> str:
    return (
        "Currently, I know movie information for these cities: "
        + table.describe()
        + ". "
        + WHICH_ZIP
    )


def unknown_location(raw_name: str | None, follow_up: str) -> str:
    """Echo the location we could not find, if the user gave one."""

    if raw_name:
        return f"I'm sorry, I don't have any data for {raw_name}. {follow_up}"
    return follow_up


def date_for(city: str) -> str:
    return f"For which date would you like movie information for {city}?"


def zipcode_for(display_date: str) -> str:
    return f"For which zipcode would you like movie information for {display_date}?"
