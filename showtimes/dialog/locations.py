"""Static table of locations the skill has showtimes for."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

KNOWN_LOCATIONS = {
    "seattle": "98101",
    "san francisco": "94103",
    "los angeles": "90012",
    "new york": "10001",
    "chicago": "60601",
    "boston": "02108",
    "saint louis": "63101",
    "st. louis": "63101",
    "st louis": "63101",
    "98101": "98101",
    "94103": "94103",
    "90012": "90012",
    "10001": "10001",
    "60601": "60601",
    "02108": "02108",
    "63101": "63101",
}


@dataclass(frozen=True)
class LocationTable:
    """Read-only mapping of lower-cased location names to zipcodes."""

    entries: Mapping[str, str]
    default_name: str

    def lookup(self, name: str) -> str | None:
        return self.entries.get(name.strip().lower())

    @property
    def default_key(self) -> str:
        return self.entries[self.default_name.lower()]

    def describe(self) -> str:
        """Spoken list of the supported city names."""

        # one spoken name per zipcode, first entry wins
        names: dict[str, str] = {}
        for name, key in self.entries.items():
            if not name.isdigit():
                names.setdefault(key, name.title())
        return ", ".join(names.values())


def build_location_table(
    default_name: str,
    extra: Mapping[str, str] | None = None,
) -> LocationTable:
    """Merge configured entries into the built-in table and freeze the result."""

    entries = dict(KNOWN_LOCATIONS)
    for name, zipcode in (extra or {}).items():
        entries[name.strip().lower()] = zipcode.strip()

    if default_name.strip().lower() not in entries:
        raise ValueError(f"Default location {default_name!r} is not a known location")

    return LocationTable(entries=MappingProxyType(entries), default_name=default_name.strip())
