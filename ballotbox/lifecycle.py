"""
Election lifecycle predicates.

All functions are pure: they look only at the election's window, its
``is_active`` flag and the instant passed in as ``now``. The window is closed
on both ends for voting, so at ``now == end_date`` an election is still active
and not yet ended.

Instants are compared at millisecond precision, the resolution the store keeps,
so these predicates agree with the query views in ``crud``.
"""

from datetime import datetime, timedelta
from typing import Optional

from ballotbox.utils import truncate_ms

UPCOMING = "upcoming"
ACTIVE = "active"
ENDED = "ended"
INACTIVE = "inactive"


def is_upcoming(start_date: datetime, now: datetime) -> bool:
    return truncate_ms(now) < truncate_ms(start_date)


def is_active(start_date: datetime, end_date: datetime, active_flag: bool, now: datetime) -> bool:
    now = truncate_ms(now)
    return truncate_ms(start_date) <= now <= truncate_ms(end_date) and bool(active_flag)


def has_ended(end_date: datetime, now: datetime) -> bool:
    return truncate_ms(now) > truncate_ms(end_date)


def election_status(start_date: datetime, end_date: datetime, active_flag: bool, now: datetime) -> str:
    """Single label for an election at ``now``.

    ``inactive`` only shows up for an election inside its window whose
    ``is_active`` flag is off.
    """
    if is_upcoming(start_date, now):
        return UPCOMING
    if has_ended(end_date, now):
        return ENDED
    if is_active(start_date, end_date, active_flag, now):
        return ACTIVE
    return INACTIVE


def time_remaining(start_date: datetime, end_date: datetime, now: datetime) -> Optional[timedelta]:
    """Time until the next transition: the start if upcoming, the end if running."""
    if is_upcoming(start_date, now):
        return truncate_ms(start_date) - truncate_ms(now)
    if has_ended(end_date, now):
        return None
    return truncate_ms(end_date) - truncate_ms(now)


def status_of(election: dict, now: datetime) -> str:
    """``election_status`` for a stored election document."""
    return election_status(
        election["start_date"], election["end_date"], election.get("is_active", True), now
    )
