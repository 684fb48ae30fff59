"""Calendar-day age of an item's last practice."""

from __future__ import annotations

import logging
from datetime import datetime

from practicio.scoring.constants import DEFAULT_ITEM_AGE

logger = logging.getLogger("practicio")


def sameCalendar(moment: datetime, now: datetime) -> datetime:
    """Express moment in now's calendar context (naive local or now's tzinfo)."""
    if now.tzinfo is None:
        if moment.tzinfo is None:
            return moment
        return moment.astimezone().replace(tzinfo=None)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=now.tzinfo)
    return moment.astimezone(now.tzinfo)


def itemAge(last_practice: datetime | None, now: datetime | None = None) -> int:
    """Whole calendar days between the start of last_practice's day and today.

    Same day -> 0, yesterday -> 1 regardless of the hour. A future last_practice
    gives a negative age. Missing last_practice, or a date that cannot be placed
    on the caller's calendar, gives DEFAULT_ITEM_AGE.
    """
    if last_practice is None:
        return DEFAULT_ITEM_AGE
    now = now or datetime.now()
    try:
        local = sameCalendar(last_practice, now)
        return (now.date() - local.date()).days
    except (OverflowError, ValueError, OSError) as e:
        logger.debug("Age fallback for %r: %s", last_practice, e)
        return DEFAULT_ITEM_AGE
