"""Calendar stepping for recurring transactions.

Occurrence dates are always computed from the anchor date rather than from
the previous occurrence. ``relativedelta`` clamps month and year steps to the
last valid day of the target month, so an anchor on Jan 31 produces Feb 29
(or 28), Mar 31, Apr 30 and so on without drifting.
"""

from datetime import date
from itertools import count
from typing import Iterator, Optional

from dateutil.relativedelta import relativedelta

from cashii.domain.trigger import Trigger


_STEPS = {
    Trigger.DAILY: relativedelta(days=1),
    Trigger.WEEKLY: relativedelta(weeks=1),
    Trigger.MONTHLY: relativedelta(months=1),
    Trigger.YEARLY: relativedelta(years=1),
}


def step_date(anchor: date, trigger: Trigger, steps: int) -> date:
    """Return the date ``steps`` calendar steps after ``anchor``.

    Args:
        anchor: First occurrence of the recurrence
        trigger: Recurrence kind; must not be ONCE
        steps: Number of steps (0 returns the anchor)

    Raises:
        ValueError: If trigger does not repeat
    """
    if trigger not in _STEPS:
        raise ValueError(f"Trigger {trigger.value} does not repeat")
    return anchor + _STEPS[trigger] * steps


def occurrence_dates(
    anchor: date,
    trigger: Trigger,
    *,
    start: Optional[date] = None,
    end: date,
    include_end: bool = True,
) -> Iterator[date]:
    """Yield every occurrence of a recurrence that falls inside a window.

    Args:
        anchor: First occurrence of the recurrence
        trigger: Recurrence kind
        start: Inclusive lower bound, or None for no lower bound
        end: Upper bound
        include_end: Whether an occurrence exactly on ``end`` is yielded

    Yields:
        Occurrence dates in ascending order
    """
    if trigger is Trigger.ONCE:
        candidates = iter([anchor])
    else:
        candidates = (step_date(anchor, trigger, steps) for steps in count())

    for candidate in candidates:
        if candidate > end or (candidate == end and not include_end):
            return
        if start is None or candidate >= start:
            yield candidate
