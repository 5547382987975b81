"""Time helpers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime.

    Comment timestamps are stored as ``TIMESTAMP WITH TIME ZONE`` and
    compared against this value by the moderation policy, so naive
    datetimes must never be mixed in.
    """
    return datetime.now(timezone.utc)
