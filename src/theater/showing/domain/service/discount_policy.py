"""Ticket discount rules.

Every rule that applies yields a candidate amount and the largest one wins.
Discounts never stack.
"""

from __future__ import annotations

from datetime import datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING

from theater.movie.domain.value_object import Movie
from theater.shared.domain import Currency, InvalidInputException, Money
from theater.shared.utils.clock import Clock, system_clock

if TYPE_CHECKING:
    from theater.showing.domain.entity import Showing

SPECIAL_MOVIE_DISCOUNT_RATE = Decimal("0.2")
MIDDAY_DISCOUNT_RATE = Decimal("0.25")
MIDDAY_WINDOW_START = time(11, 0)
MIDDAY_WINDOW_END = time(16, 0)

# flat amount off by position in the day
SEQUENCE_DISCOUNTS: dict[int, Decimal] = {
    1: Decimal("3"),
    2: Decimal("2"),
    7: Decimal("1"),
}


class DiscountPolicy:
    """Computes the best discount for a showing

    Holds no state besides the clock used for the midday window, so one
    instance can serve every showing.
    """

    def __init__(self, clock: Clock = system_clock) -> None:
        self._clock = clock

    def compute_discount(self, showing: Showing | None) -> Money:
        """Largest applicable discount, at full precision

        Raises:
            InvalidInputException: showing missing or sequence is 0, movie
                or ticket price missing
        """
        self._validate_showing(showing)
        movie = showing.movie
        self._validate_movie(movie)

        price = movie.ticket_price
        candidates = [
            Money.zero(price.currency),
            self._special_movie_discount(movie),
            self._sequence_discount(showing.sequence_of_day, price.currency),
            self._midday_discount(showing.start_time, price),
        ]
        return max(candidates, key=lambda candidate: candidate.amount)

    def _special_movie_discount(self, movie: Movie) -> Money:
        if not movie.is_special:
            return Money.zero(movie.ticket_price.currency)
        return movie.ticket_price.multiply(SPECIAL_MOVIE_DISCOUNT_RATE)

    def _sequence_discount(self, sequence_of_day: int, currency: Currency) -> Money:
        return Money(SEQUENCE_DISCOUNTS.get(sequence_of_day, Decimal("0")), currency)

    def _midday_discount(self, start_time: datetime, price: Money) -> Money:
        # window bounds come from the clock's date, not the showing's date
        today = self._clock().date()
        lower = datetime.combine(today, MIDDAY_WINDOW_START, tzinfo=start_time.tzinfo)
        upper = datetime.combine(today, MIDDAY_WINDOW_END, tzinfo=start_time.tzinfo)
        if lower < start_time < upper:
            return price.multiply(MIDDAY_DISCOUNT_RATE)
        return Money.zero(price.currency)

    @staticmethod
    def _validate_showing(showing: Showing | None) -> None:
        if showing is None or showing.sequence_of_day == 0:
            raise InvalidInputException(
                "Showing cannot be None and its sequence of day cannot be 0"
            )

    @staticmethod
    def _validate_movie(movie: Movie | None) -> None:
        if movie is None or movie.ticket_price is None:
            raise InvalidInputException(
                "Movie cannot be None and its ticket price cannot be None"
            )


default_discount_policy = DiscountPolicy()
