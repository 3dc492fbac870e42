"""ISO-8601 duration helpers for recipe timing fields."""

from datetime import timedelta

import isodate


def parse_iso_duration(value):
    """
    Parse an ISO-8601 duration string such as "PT1H30M".

    Returns None for None/empty input and raises ValueError when the text
    is not an ISO-8601 time duration. Calendar units (years, months) are
    rejected since they have no fixed length.
    """
    if value is None or not str(value).strip():
        return None
    try:
        parsed = isodate.parse_duration(str(value).strip())
    except isodate.ISO8601Error:
        raise ValueError(f"invalid duration: {value!r}")
    if not isinstance(parsed, timedelta):
        raise ValueError(f"invalid duration: {value!r}")
    return parsed


def format_duration(value):
    """Compact ISO form, e.g. "PT1H30M"; zero is "PT0S"."""
    if not value:
        return "PT0S"
    return isodate.duration_isoformat(value)


def total_duration(cook_time, prep_time):
    """Return the ISO string for cook + prep, treating missing parts as zero."""
    cook = parse_iso_duration(cook_time) or timedelta(0)
    prep = parse_iso_duration(prep_time) or timedelta(0)
    if cook < timedelta(0) or prep < timedelta(0):
        raise ValueError("durations cannot be negative")
    return format_duration(cook + prep)
