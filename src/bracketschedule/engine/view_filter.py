"""Day / time-slot filtering of the schedule."""

from typing import Iterable, List, Optional

from bracketschedule.constants import FILTER_ALL
from bracketschedule.models.game import Game


def _matches(value: str, wanted: Optional[str]) -> bool:
    return wanted is None or wanted == FILTER_ALL or value == wanted


def filter_games(
    games: Iterable[Game],
    day: Optional[str] = None,
    time_slot: Optional[str] = None,
) -> List[Game]:
    """Return the games played on ``day`` in ``time_slot``, in input order.

    ``None`` or ``"All"`` disables the corresponding test.
    """
    return [g for g in games if _matches(g.day, day) and _matches(g.time_slot, time_slot)]
