from dataclasses import dataclass
from datetime import timedelta

from theater.shared.domain import Money

SPECIAL_MOVIE_CODE = 1


@dataclass(frozen=True)
class Movie:
    """Movie shown by the theater

    Equality is structural. ``Money`` compares its Decimal amount by value,
    so 12.5 and 12.50 are the same price.
    """

    title: str
    description: str
    running_time: timedelta
    ticket_price: Money | None
    special_code: int = 0

    @property
    def is_special(self) -> bool:
        return self.special_code == SPECIAL_MOVIE_CODE
