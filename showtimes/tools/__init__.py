"""Lookup package exports."""

from .base import LookupFailure, LookupResult, LookupSuccess, ShowtimeLookup, TheaterListing
from .fandango import FandangoLookup

__all__ = [
    "LookupFailure",
    "LookupResult",
    "LookupSuccess",
    "ShowtimeLookup",
    "TheaterListing",
    "FandangoLookup",
]
