from datetime import datetime
from typing import Callable

from .config import get_timezone

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current wall-clock time as a naive datetime in the theater timezone"""
    tz = get_timezone()
    if tz is None:
        return datetime.now()
    return datetime.now(tz).replace(tzinfo=None)


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns ``moment``"""

    def _now() -> datetime:
        return moment

    return _now
